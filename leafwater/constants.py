# leafwater/constants.py
"""Physical constants, unit factors and form defaults."""

WATER_DENSITY_KG_PER_L = 1.0  # ρ_w

ML_PER_L = 1000.0
L_PER_M3 = 1000.0

# Volume thresholds (L) of the display unit policy
MILLILITER_FINE_BELOW_L = 0.001  # below: mL with 2 decimals
LITER_FROM_L = 1.0
CUBIC_METER_FROM_L = 1000.0

# Initial values of the input form
DEFAULT_CROP_ID = "tunisian-olive"
DEFAULT_LOSS_FRACTION_PERCENT = 20.0
DEFAULT_PROCESSING_FACTOR = 1.0
DEFAULT_RECOVERY_EFFICIENCY_PERCENT = 50.0
