# leafwater/domain/crop_profile.py
"""Описание культуры, с которой собирается листовая биомасса.

Профиль хранит *литературные* константы, которые подставляются в форму
при выборе культуры:

* **biomass_factor** – коэффициент биомассы *F_b*: сколько килограммов
  листьев приходится на килограмм собранных плодов (оливок, яблок).
* **moisture_content_percent** – влажность листьев *MC*, % от массы.

Профили создаются один раз при импорте каталога и больше не меняются,
поэтому dataclass объявлен ``frozen``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CropProfile:
    """Неизменяемый профиль культуры (дерева)."""

    id: str                          # уникальный идентификатор, напр. "tunisian-olive"
    display_name: str                # "Tunisian Olive"
    scientific_name: str             # "Olea europaea L. cv. Chemlali"
    biomass_factor: float            # F_b, кг листьев / кг плодов
    moisture_content_percent: float  # MC, %

    # Статические данные: ошибка здесь – ошибка программиста
    def __post_init__(self) -> None:
        if not self.biomass_factor > 0:
            raise ValueError(
                f"Biomass factor of '{self.id}' must be positive."
            )
        if not 0 <= self.moisture_content_percent <= 100:
            raise ValueError(
                f"Moisture content of '{self.id}' must lie in [0, 100]."
            )

    @property
    def fruit_label(self) -> str:
        """Harvested fruit noun used in prompts ("apple" or "olive")."""
        return "apple" if "Apple" in self.display_name else "olive"
