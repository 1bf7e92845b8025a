# leafwater/domain/input_form.py
"""Форма ввода калькулятора.

Содержит идентификатор выбранной культуры и шесть *сырых* значений так,
как их ввёл пользователь: число, строка из поля ввода или ``None`` для
пустого поля. Разбор и проверка выполняются в ``core.validation``.

Поля ``moisture_content_percent`` и ``biomass_factor`` перезаписываются
значениями профиля при смене культуры, но после этого остаются
редактируемыми.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional, Tuple, Union

from ..constants import (
    DEFAULT_CROP_ID,
    DEFAULT_LOSS_FRACTION_PERCENT,
    DEFAULT_PROCESSING_FACTOR,
    DEFAULT_RECOVERY_EFFICIENCY_PERCENT,
)
from .catalog import lookup_or_default

RawValue = Union[str, int, float, None]

# Числовые поля в порядке вывода ошибок
NUMERIC_FIELDS: Tuple[str, ...] = (
    "total_mass_kg",
    "loss_fraction_percent",
    "processing_factor",
    "moisture_content_percent",
    "recovery_efficiency_percent",
    "biomass_factor",
)

# Поля, которые заполняются из профиля культуры
CROP_FIELDS: Tuple[str, ...] = ("moisture_content_percent", "biomass_factor")


@dataclass(slots=True)
class InputForm:
    """Изменяемая форма одной интерактивной сессии."""

    selected_crop_id: str = DEFAULT_CROP_ID
    total_mass_kg: RawValue = None                        # M_h, кг
    loss_fraction_percent: RawValue = DEFAULT_LOSS_FRACTION_PERCENT        # L_c, %
    processing_factor: RawValue = DEFAULT_PROCESSING_FACTOR                # E_p
    moisture_content_percent: RawValue = None             # MC, %
    recovery_efficiency_percent: RawValue = DEFAULT_RECOVERY_EFFICIENCY_PERCENT  # η, %
    biomass_factor: RawValue = None                       # F_b

    @classmethod
    def default(cls, crop_id: Optional[str] = None) -> "InputForm":
        """Initial form: default factors plus the crop's F_b and MC, mass left empty."""
        crop = lookup_or_default(crop_id or DEFAULT_CROP_ID)
        return cls(
            selected_crop_id=crop.id,
            moisture_content_percent=crop.moisture_content_percent,
            biomass_factor=crop.biomass_factor,
        )

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
