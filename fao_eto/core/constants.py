"""Physical constants for FAO-56 reference evapotranspiration."""

import numpy as np

# ============================================================================
# RADIATION CONSTANTS
# ============================================================================

# Solar constant (MJ m-2 min-1)
SOLAR_CONSTANT = 0.0820

# Stefan-Boltzmann constant - daily (MJ K-4 m-2 day-1)
STEFAN_BOLTZMANN_DAY = 4.903e-9

# Albedo of the hypothetical grass reference crop (dimensionless)
GRASS_ALBEDO = 0.23

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Pressure at sea level for the standard atmosphere (kPa)
SEA_LEVEL_PRESSURE = 101.3

# Temperature of the standard atmosphere used in eq. 7 (K)
STANDARD_TEMPERATURE = 293.0

# Lapse rate of the standard atmosphere (K m-1)
LAPSE_RATE = 0.0065

# Psychrometric constant coefficient, eq. 8 (kPa-1 per kPa)
PSY_COEFFICIENT = 0.000665

# Psychrometer coefficients, eq. 16 (°C-1)
PSY_COEFFICIENT_VENTILATED = 0.000662
PSY_COEFFICIENT_NATURAL = 0.000800
PSY_COEFFICIENT_NON_VENTILATED = 0.001200

# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

CELSIUS_TO_KELVIN = 273.15

# ============================================================================
# TIME CONSTANTS
# ============================================================================

MINUTES_PER_DAY = 24.0 * 60.0
HOURS_PER_DAY = 24.0
DAYS_PER_YEAR = 365.0

# ============================================================================
# ANGLE CONVERSIONS
# ============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# ============================================================================
# CONVERSION FACTORS
# ============================================================================

# Latent heat of vaporisation at 20 °C inverted (kg MJ-1), so MJ m-2 day-1 -> mm day-1
MJ_M2_DAY_TO_MM_DAY = 0.408

# km/h -> m/s
KPH_TO_MPS = 1000.0 / 3600.0

__all__ = [
    'SOLAR_CONSTANT', 'STEFAN_BOLTZMANN_DAY', 'GRASS_ALBEDO',
    'SEA_LEVEL_PRESSURE', 'STANDARD_TEMPERATURE', 'LAPSE_RATE',
    'PSY_COEFFICIENT', 'PSY_COEFFICIENT_VENTILATED', 'PSY_COEFFICIENT_NATURAL',
    'PSY_COEFFICIENT_NON_VENTILATED', 'CELSIUS_TO_KELVIN', 'MINUTES_PER_DAY',
    'HOURS_PER_DAY', 'DAYS_PER_YEAR', 'DEG_TO_RAD', 'RAD_TO_DEG',
    'MJ_M2_DAY_TO_MM_DAY', 'KPH_TO_MPS'
]
