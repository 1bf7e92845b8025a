# leafwater/facade/analyzer.py
"""Высокоуровневый *facade* для расчётов и построения графиков.

Класс **WaterYieldAnalyzer** берёт заполненную форму и предоставляет:
1. Оценку объёма воды для неё (``estimate``).
2. Сравнение всех культур каталога при тех же массе, потерях,
   коэффициенте обработки и КПД извлечения (``compare_crops``).
3. Серию расчётов по массе урожая (``sweep_mass``).
4. Тонкие обёртки ``plot_*`` над модулем *visualization.plots*.

Результаты серий возвращаются в виде ``pandas.DataFrame``.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from ..core.calculator import calculate, volume_from_values
from ..core.formatting import classify_volume, format_volume
from ..core.formulas import compute_water_volume_array
from ..core.validation import InvalidFormError, validate
from ..domain.catalog import CROP_CATALOG
from ..domain.input_form import InputForm
from ..visualization import plots

logger = logging.getLogger(__name__)


class WaterYieldAnalyzer:
    """Единая точка входа для пакетных расчётов над одной формой."""

    def __init__(self, form: InputForm) -> None:
        self.form = form

    # ------------------------------------------------------------------
    # Расчёты
    # ------------------------------------------------------------------

    def estimate(self) -> Tuple[float, str]:
        """Return ``(volume_liters, formatted)``; raises :class:`InvalidFormError`."""
        volume = calculate(self.form)
        return volume, format_volume(volume)

    def compare_crops(self) -> pd.DataFrame:
        """Таблица: одна строка на культуру каталога (в порядке каталога).

        F_b и MC берутся из профиля культуры, остальные поля – из формы.
        """
        checked = validate(self.form)
        # Поля культуры подменяются, поэтому их ошибки не мешают сравнению
        blocking = [
            e for e in checked.errors
            if e.field not in ("biomass_factor", "moisture_content_percent")
        ]
        if blocking:
            raise InvalidFormError(checked)

        records: list[dict] = []
        for crop in CROP_CATALOG:
            values = dict(checked.values)
            values["biomass_factor"] = crop.biomass_factor
            values["moisture_content_percent"] = crop.moisture_content_percent
            volume = volume_from_values(values)
            records.append(
                {
                    "crop_id": crop.id,
                    "crop": crop.display_name,
                    "scientific_name": crop.scientific_name,
                    "biomass_factor": crop.biomass_factor,
                    "moisture_content_percent": crop.moisture_content_percent,
                    "volume_l": volume,
                    "formatted": format_volume(volume),
                }
            )
        logger.info("Compared %d crops", len(records))
        return pd.DataFrame.from_records(records)

    def sweep_mass(self, masses: Sequence[float]) -> pd.DataFrame:
        """Объём воды для ряда масс урожая при остальных полях формы."""
        checked = validate(self.form)
        blocking = [e for e in checked.errors if e.field != "total_mass_kg"]
        if blocking:
            raise InvalidFormError(checked)

        mass_arr = np.asarray(masses, dtype=float)
        if mass_arr.ndim != 1 or not np.all(np.isfinite(mass_arr)) or np.any(mass_arr <= 0):
            raise ValueError("Masses must be a 1-D sequence of finite positive numbers.")

        v = checked.values
        volumes = compute_water_volume_array(
            mass_arr,
            v["biomass_factor"],
            v["loss_fraction_percent"],
            v["processing_factor"],
            v["moisture_content_percent"],
            v["recovery_efficiency_percent"],
        )
        return pd.DataFrame(
            {
                "total_mass_kg": mass_arr,
                "volume_l": volumes,
                "unit": [classify_volume(x).symbol for x in volumes],
                "formatted": [format_volume(float(x)) for x in volumes],
            }
        )

    # ------------------------------------------------------------------
    # Быстрые обёртки для графиков
    # ------------------------------------------------------------------

    def plot_crop_comparison(self) -> None:
        """Столбчатая диаграмма объёма воды по культурам."""
        plots.plot_crop_comparison(self.compare_crops())

    def plot_mass_sweep(self, masses: Sequence[float]) -> None:
        """График объёма воды в зависимости от массы урожая."""
        plots.plot_mass_sweep(self.sweep_mass(masses))
