# leafwater/core/calculator.py
"""Калькулятор извлечения воды: интерактивная сессия над одной формой.

* Принимает на вход форму (:class:`InputForm`), которой владеет сессия.
* ``calculate`` сначала проверяет форму и только затем применяет формулу;
  при ошибках результат сбрасывается, а сообщения сохраняются для показа.
* ``select_crop`` подставляет *F_b* и *MC* выбранной культуры и, если
  результат уже был показан, сразу пересчитывает его.
* ``update_field`` меняет одно поле и снимает только его ошибку;
  пересчёт при ручном вводе не выполняется – пользователь снова
  нажимает «Calculate». Исключение – поля культуры (*F_b*, *MC*): их
  изменение пересчитывает результат так же, как смена культуры.

Чистая функция :func:`calculate` доступна и без сессии – её использует
фасад для сравнений и серий расчётов.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .formatting import format_volume
from .formulas import compute_water_volume
from .validation import InvalidFormError, ValidationResult, validate
from ..domain.catalog import lookup_or_default
from ..domain.crop_profile import CropProfile
from ..domain.input_form import CROP_FIELDS, NUMERIC_FIELDS, InputForm, RawValue

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Чистые операции
# ---------------------------------------------------------------------------


def volume_from_values(values: Mapping[str, float]) -> float:
    """Apply the formula to already validated numbers."""
    return compute_water_volume(
        values["total_mass_kg"],
        values["biomass_factor"],
        values["loss_fraction_percent"],
        values["processing_factor"],
        values["moisture_content_percent"],
        values["recovery_efficiency_percent"],
    )


def calculate(form: InputForm) -> float:
    """Объём воды (л) для корректной формы.

    Raises
    ------
    InvalidFormError
        Если форма не проходит :func:`validate` – вызывающий код обязан
        проверять форму заранее.
    """
    checked = validate(form)
    if not checked.is_valid:
        raise InvalidFormError(checked)
    return volume_from_values(checked.values)


# ---------------------------------------------------------------------------
# Состояние сессии
# ---------------------------------------------------------------------------


@dataclass
class SessionState:
    """Что сейчас видит пользователь: ошибки полей и последний результат."""

    errors: Dict[str, str] = field(default_factory=dict)
    result: Optional[float] = None  # л; None – результат не показан


class ExtractionCalculator:
    """Интерактивный калькулятор: форма + ошибки + последний результат."""

    def __init__(self, form: Optional[InputForm] = None) -> None:
        self.form = form if form is not None else InputForm.default()
        self.state = SessionState()

    # ------------------------------------------------------------------
    # Свойства для слоя представления
    # ------------------------------------------------------------------

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self.state.errors)

    @property
    def result(self) -> Optional[float]:
        return self.state.result

    @property
    def formatted_result(self) -> Optional[str]:
        if self.state.result is None:
            return None
        return format_volume(self.state.result)

    @property
    def selected_crop(self) -> CropProfile:
        return lookup_or_default(self.form.selected_crop_id)

    # ------------------------------------------------------------------
    # Операции
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """Проверить текущую форму и запомнить сообщения об ошибках."""
        checked = validate(self.form)
        self.state.errors = dict(checked)
        return checked

    def calculate(self) -> Optional[float]:
        """Validate, then compute; returns ``None`` (and keeps the errors) if invalid."""
        checked = self.validate()
        if not checked.is_valid:
            self.state.result = None
            return None

        volume = volume_from_values(checked.values)
        self.state.result = volume
        logger.debug(
            "crop=%s V_w=%.6f L (%s)",
            self.form.selected_crop_id,
            volume,
            format_volume(volume),
        )
        return volume

    def select_crop(self, crop_id: str) -> CropProfile:
        """Подставить F_b и MC культуры; остальные поля не трогаются."""
        crop = lookup_or_default(crop_id)
        self.form.selected_crop_id = crop.id
        self.form.biomass_factor = crop.biomass_factor
        self.form.moisture_content_percent = crop.moisture_content_percent
        logger.info("Selected crop %s", crop.id)

        self._recalculate_if_shown()
        return crop

    def update_field(self, name: str, value: RawValue) -> None:
        """Изменить одно числовое поле и снять его ошибку."""
        if name == "selected_crop_id":
            self.select_crop(str(value))
            return
        if name not in NUMERIC_FIELDS:
            raise ValueError(f"Unknown form field '{name}'")

        setattr(self.form, name, value)
        self.state.errors.pop(name, None)

        if name in CROP_FIELDS:
            self._recalculate_if_shown()

    # ------------------------------------------------------------------
    # Вспомогательное
    # ------------------------------------------------------------------

    def _recalculate_if_shown(self) -> None:
        # Пересчёт без задержки, только если результат уже был показан
        if self.state.result is not None:
            self.calculate()
