# leafwater/core/formatting.py
"""Вывод объёма в удобных единицах.

Политика выбора единиц (границы – полуинтервалы):

* ``V < 0.001`` л        → миллилитры, 2 знака (``0.05 mL``);
* ``0.001 ≤ V < 1`` л    → миллилитры, 0 знаков (``500 mL``);
* ``1 ≤ V < 1000`` л     → литры, 2 знака (``12.34 L``);
* ``V ≥ 1000`` л         → кубометры, 2 знака (``1.50 m³``).

Округление – «половина вверх» по *точному* двоичному значению числа
(а не банковское округление ``format``): ``1.125 L`` даёт ``1.13 L``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

from ..constants import (
    CUBIC_METER_FROM_L,
    L_PER_M3,
    LITER_FROM_L,
    MILLILITER_FINE_BELOW_L,
    ML_PER_L,
)


class VolumeUnit(Enum):
    """Единица отображения и число знаков после запятой."""

    MILLILITER_FINE = ("mL", 2)
    MILLILITER = ("mL", 0)
    LITER = ("L", 2)
    CUBIC_METER = ("m³", 2)

    def __init__(self, symbol: str, decimals: int) -> None:
        self.symbol = symbol
        self.decimals = decimals

    def __str__(self) -> str:
        return self.symbol


def classify_volume(volume_liters: float) -> VolumeUnit:
    """Pick the display unit for a volume in liters."""
    if volume_liters < MILLILITER_FINE_BELOW_L:
        return VolumeUnit.MILLILITER_FINE
    if volume_liters < LITER_FROM_L:
        return VolumeUnit.MILLILITER
    if volume_liters < CUBIC_METER_FROM_L:
        return VolumeUnit.LITER
    return VolumeUnit.CUBIC_METER


def to_fixed(value: float, decimals: int) -> str:
    """Fixed-point string, rounding half up on the exact value of *value*."""
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0  # "-0" печатается без знака
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    # точности должно хватить на все цифры результата
    context = Context(prec=max(28, exact.adjusted() + decimals + 2))
    rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return f"{rounded:f}"


def format_volume(volume_liters: float) -> str:
    """Форматировать объём (л) строкой с единицей измерения."""
    unit = classify_volume(volume_liters)
    if unit is VolumeUnit.MILLILITER_FINE or unit is VolumeUnit.MILLILITER:
        scaled = volume_liters * ML_PER_L
    elif unit is VolumeUnit.CUBIC_METER:
        scaled = volume_liters / L_PER_M3
    else:
        scaled = volume_liters
    return f"{to_fixed(scaled, unit.decimals)} {unit.symbol}"
