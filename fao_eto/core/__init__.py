"""Core module for FAO-56 reference ET: constants and unit conversion."""

from . import constants
from .constants import (
    SOLAR_CONSTANT,
    STEFAN_BOLTZMANN_DAY,
    GRASS_ALBEDO,
    CELSIUS_TO_KELVIN,
    DEG_TO_RAD,
    RAD_TO_DEG,
    MJ_M2_DAY_TO_MM_DAY,
)
from .conversion import (
    celsius_to_kelvin,
    kelvin_to_celsius,
    deg_to_rad,
    rad_to_deg,
    kph_to_mps,
)

__all__ = [
    'constants',
    'SOLAR_CONSTANT',
    'STEFAN_BOLTZMANN_DAY',
    'GRASS_ALBEDO',
    'CELSIUS_TO_KELVIN',
    'DEG_TO_RAD',
    'RAD_TO_DEG',
    'MJ_M2_DAY_TO_MM_DAY',
    'celsius_to_kelvin',
    'kelvin_to_celsius',
    'deg_to_rad',
    'rad_to_deg',
    'kph_to_mps',
]
