# leafwater/core/validation.py
"""Проверка формы ввода.

Каждое поле проверяется **независимо** (без short-circuit), чтобы
пользователь сразу увидел все ошибки. Ошибка ввода – это *данные*
(:class:`InvalidInput`), а не исключение: вызывающий код отображает
сообщения и ждёт исправления.

Правила:

* ``total_mass_kg`` – обязательное конечное число > 0;
* ``loss_fraction_percent``, ``moisture_content_percent``,
  ``recovery_efficiency_percent`` – число в [0, 100];
* ``processing_factor``, ``biomass_factor`` – число > 0.

Если все поля корректны, но объём не помещается в float (``inf``),
ошибка записывается на ``total_mass_kg``.

Границы 0 и 100 для процентов допустимы.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .formulas import compute_water_volume
from ..domain.input_form import NUMERIC_FIELDS, InputForm, RawValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InvalidInput:
    """Одна ошибка ввода: поле и человекочитаемая причина."""

    field: str
    reason: str


class InvalidFormError(ValueError):
    """Raised when a calculation is requested for a form that does not validate."""

    def __init__(self, result: "ValidationResult") -> None:
        self.result = result
        super().__init__(
            "Cannot calculate with invalid input: "
            + "; ".join(f"{e.field}: {e.reason}" for e in result.errors)
        )


class ValidationResult(Mapping):
    """Read-only mapping *field → message*; no entry means the field is valid.

    Also carries the numbers parsed from the valid fields so the
    calculator does not have to parse the form a second time.
    """

    def __init__(self, errors: List[InvalidInput], values: Dict[str, float]) -> None:
        self._errors = list(errors)
        self._messages = {e.field: e.reason for e in self._errors}
        self._values = dict(values)

    def __getitem__(self, field: str) -> str:
        return self._messages[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ValidationResult({self._messages!r})"

    @property
    def errors(self) -> List[InvalidInput]:
        return list(self._errors)

    @property
    def values(self) -> Dict[str, float]:
        return dict(self._values)

    @property
    def is_valid(self) -> bool:
        return not self._errors


# ---------------------------------------------------------------------------
# Разбор сырых значений
# ---------------------------------------------------------------------------


def parse_number(raw: RawValue) -> Optional[float]:
    """Convert a raw form value to a finite float, or ``None`` if it is not one.

    Empty strings, ``None``, booleans, NaN and infinities are all "non-numeric".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    elif isinstance(raw, (int, float)):
        value = float(raw)
    else:
        return None
    if not math.isfinite(value):
        return None
    return value + 0.0  # -0.0 -> 0.0


def _positive(value: float) -> bool:
    return value > 0


def _percentage(value: float) -> bool:
    return 0 <= value <= 100


# поле -> (условие корректности, сообщение об ошибке)
RULES: Dict[str, Tuple[Callable[[float], bool], str]] = {
    "total_mass_kg": (_positive, "Please enter a valid positive mass value"),
    "loss_fraction_percent": (_percentage, "Loss fraction must be between 0 and 100%"),
    "processing_factor": (_positive, "Processing factor must be a positive number"),
    "moisture_content_percent": (
        _percentage,
        "Moisture content must be between 0 and 100%",
    ),
    "recovery_efficiency_percent": (
        _percentage,
        "Recovery efficiency must be between 0 and 100%",
    ),
    "biomass_factor": (_positive, "Biomass factor must be a positive number"),
}


# Поля по отдельности корректны, но произведение переполняет float
RESULT_OUT_OF_RANGE = "The resulting volume is out of range; please enter smaller values"


def validate_field(field: str, raw: RawValue) -> Tuple[Optional[float], Optional[InvalidInput]]:
    """Validate one field; returns ``(value, None)`` or ``(None, error)``."""
    is_ok, message = RULES[field]
    value = parse_number(raw)
    if value is None or not is_ok(value):
        return None, InvalidInput(field, message)
    return value, None


def validate(form: InputForm) -> ValidationResult:
    """Проверить все шесть числовых полей формы."""
    errors: List[InvalidInput] = []
    values: Dict[str, float] = {}

    for field in NUMERIC_FIELDS:
        value, error = validate_field(field, getattr(form, field))
        if error is not None:
            errors.append(error)
        else:
            values[field] = value

    if not errors:
        volume = compute_water_volume(
            values["total_mass_kg"],
            values["biomass_factor"],
            values["loss_fraction_percent"],
            values["processing_factor"],
            values["moisture_content_percent"],
            values["recovery_efficiency_percent"],
        )
        if not math.isfinite(volume):
            errors.append(InvalidInput("total_mass_kg", RESULT_OUT_OF_RANGE))

    if errors:
        logger.debug("Form rejected: %s", ", ".join(e.field for e in errors))
    return ValidationResult(errors, values)
