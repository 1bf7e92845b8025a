# leafwater/core/formulas.py

import numpy as np

from ..constants import WATER_DENSITY_KG_PER_L


def compute_water_volume(
    total_mass_kg: float,
    biomass_factor: float,
    loss_fraction_percent: float,
    processing_factor: float,
    moisture_content_percent: float,
    recovery_efficiency_percent: float,
) -> float:
    """Объём извлекаемой воды V_w (л).

    Formula: *V_w* = M_h × F_b × (1 − L_c) × E_p × MC × η / ρ_w,
    percentages converted to fractions. No rounding.
    """
    loss = loss_fraction_percent / 100
    moisture = moisture_content_percent / 100
    efficiency = recovery_efficiency_percent / 100
    return (
        total_mass_kg
        * biomass_factor
        * (1 - loss)
        * processing_factor
        * moisture
        * efficiency
    ) / WATER_DENSITY_KG_PER_L


def compute_water_volume_array(
    total_mass_kg: np.ndarray,
    biomass_factor: float,
    loss_fraction_percent: float,
    processing_factor: float,
    moisture_content_percent: float,
    recovery_efficiency_percent: float,
) -> np.ndarray:
    """Vectorised :func:`compute_water_volume` over an array of masses.

    Keeps the scalar multiplication order, so element *i* is bit-identical
    to ``compute_water_volume(total_mass_kg[i], ...)``.
    """
    masses = np.asarray(total_mass_kg, dtype=float)
    loss = loss_fraction_percent / 100
    moisture = moisture_content_percent / 100
    efficiency = recovery_efficiency_percent / 100
    return (
        masses
        * biomass_factor
        * (1 - loss)
        * processing_factor
        * moisture
        * efficiency
    ) / WATER_DENSITY_KG_PER_L
