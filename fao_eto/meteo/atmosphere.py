"""Atmospheric parameters: pressure, psychrometric constant, temperature and wind."""

import numbers
from enum import IntEnum

import numpy as np

from ..core.constants import (
    LAPSE_RATE,
    PSY_COEFFICIENT,
    PSY_COEFFICIENT_NATURAL,
    PSY_COEFFICIENT_NON_VENTILATED,
    PSY_COEFFICIENT_VENTILATED,
    SEA_LEVEL_PRESSURE,
    STANDARD_TEMPERATURE,
)
from ..utils.exceptions import DomainError, PsychrometerTypeError, handle_math_errors
from ..utils.logger import Logger


class Psychrometer(IntEnum):
    """Psychrometer types accepted by ``psy_const_of_psychrometer``."""

    VENTILATED = 1      # Asmann type, ~5 m s-1 air movement
    NATURAL = 2         # natural ventilation, ~1 m s-1
    NON_VENTILATED = 3  # installed indoors


PSYCHROMETER_COEFFICIENTS = {
    Psychrometer.VENTILATED: PSY_COEFFICIENT_VENTILATED,
    Psychrometer.NATURAL: PSY_COEFFICIENT_NATURAL,
    Psychrometer.NON_VENTILATED: PSY_COEFFICIENT_NON_VENTILATED,
}


@handle_math_errors
def atm_pressure(altitude: float) -> float:
    """
    Estimate atmospheric pressure from altitude (eq. 7).

    Simplification of the ideal gas law assuming 20 deg C for a standard
    atmosphere.

    Args:
        altitude: Elevation above sea level (m)

    Returns:
        Atmospheric pressure (kPa)
    """
    tmp = (STANDARD_TEMPERATURE - (LAPSE_RATE * altitude)) / STANDARD_TEMPERATURE
    return np.power(tmp, 5.26) * SEA_LEVEL_PRESSURE


@handle_math_errors
def psy_const(atmos_pres: float) -> float:
    """
    Calculate the psychrometric constant (eq. 8).

    Assumes a ventilated (Asmann type) psychrometer with air movement of
    about 5 m/s. If the psychrometer type is known use
    ``psy_const_of_psychrometer`` instead.

    Args:
        atmos_pres: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa degC-1)
    """
    return PSY_COEFFICIENT * atmos_pres


@handle_math_errors
def psy_const_of_psychrometer(psychrometer: int, atmos_pres: float) -> float:
    """
    Calculate the psychrometric constant for a given type of psychrometer (eq. 15/16).

    Args:
        psychrometer: 1 (ventilated), 2 (natural ventilation) or
            3 (non-ventilated, installed indoors); see ``Psychrometer``
        atmos_pres: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa degC-1)

    Raises:
        PsychrometerTypeError: If psychrometer is not the integer 1, 2 or 3
        DomainError: If the result is not finite
    """
    is_integer = isinstance(psychrometer, numbers.Integral) and not isinstance(psychrometer, (bool, np.bool_))
    if not is_integer or psychrometer not in PSYCHROMETER_COEFFICIENTS:
        Logger.error(f"Unknown psychrometer type: {psychrometer!r}")
        raise PsychrometerTypeError(
            f"psychrometer should be in range 1 to 3: {psychrometer}",
            psychrometer=psychrometer
        )
    return PSYCHROMETER_COEFFICIENTS[Psychrometer(psychrometer)] * atmos_pres


@handle_math_errors
def daily_mean_t(tmin: float, tmax: float) -> float:
    """Estimate mean daily temperature from the daily minimum and maximum (eq. 9)."""
    return (tmax + tmin) / 2.0


@handle_math_errors
def wind_speed_2m(ws: float, z: float) -> float:
    """
    Convert wind speed measured at height *z* to wind speed at 2 m (eq. 47).

    Assumes a short grass surface.

    Args:
        ws: Measured wind speed (m s-1)
        z: Height of wind measurement above ground surface (m)

    Returns:
        Wind speed at 2 m above the surface (m s-1)

    Raises:
        DomainError: If z is too low for the logarithmic wind profile
    """
    log_arg = 67.8 * z - 5.42
    if log_arg <= 0 or log_arg == 1:
        raise DomainError(
            f"measurement height {z} m is outside the logarithmic wind profile",
            formula="wind_speed_2m",
            arguments={"ws": ws, "z": z}
        )
    return ws * (4.87 / np.log(log_arg))
