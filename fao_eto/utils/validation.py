"""
Validation utilities for the FAO-56 reference ET library.

Provides range checks for the inputs that carry physical bounds. Every
check returns a ``CheckResult`` instead of raising, so callers decide
whether a failure is fatal for their use case.
"""

import numbers
from typing import Any, Callable, NamedTuple, Optional

import numpy as np

from ..config.settings import VALIDATION_RANGES
from ..core.conversion import deg_to_rad
from .exceptions import EToError, InputRangeError, create_error_context


# Bounds in radians, computed once from the degree ranges in settings
MIN_LATITUDE_RAD, MAX_LATITUDE_RAD = (deg_to_rad(d) for d in VALIDATION_RANGES["latitude_deg"])
MIN_SOL_DEC_RAD, MAX_SOL_DEC_RAD = (deg_to_rad(d) for d in VALIDATION_RANGES["sol_dec_deg"])
MIN_SHA_RAD, MAX_SHA_RAD = (deg_to_rad(d) for d in VALIDATION_RANGES["sunset_hour_angle_deg"])

MIN_DOY, MAX_DOY = VALIDATION_RANGES["day_of_year"]
MIN_DAY_HOURS, MAX_DAY_HOURS = VALIDATION_RANGES["day_hours"]


class CheckResult(NamedTuple):
    """
    Outcome of a range check.

    Attributes:
        is_valid: True if the value passed the check
        value: The checked value, unchanged (None when an evaluation failed)
        message: Human readable outcome, naming bounds and value on failure
        parameter: Label of the checked parameter
        bounds: (lower, upper) bounds the value was checked against
        error: Exception captured by ``evaluate``, if any
    """

    is_valid: bool
    value: Any
    message: str
    parameter: Optional[str] = None
    bounds: Optional[tuple] = None
    error: Optional[Exception] = None

    def unwrap(self):
        """
        Return the checked value, or raise if the check failed.

        Returns:
            The unchanged value

        Raises:
            InputRangeError: For a failed range check
            EToError: The captured error for a failed ``evaluate``
        """
        if self.is_valid:
            return self.value
        if self.error is not None:
            raise self.error
        Logger.warning(self.message)
        raise InputRangeError(self.message, parameter=self.parameter, value=self.value, bounds=self.bounds)


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _is_number(value) -> bool:
    # NaN is the only real unequal to itself, works for int and Fraction too
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, (bool, np.bool_))
        and value == value
    )


def check_day_hours(hours, name: str = "hours") -> CheckResult:
    """
    Check that a count of hours in a day is an integer in the range 0-24.

    Args:
        hours: Day hours (sunshine or daylight)
        name: Label used in the failure message

    Returns:
        CheckResult
    """
    bounds = (MIN_DAY_HOURS, MAX_DAY_HOURS)
    if _is_integer(hours) and MIN_DAY_HOURS <= hours <= MAX_DAY_HOURS:
        return CheckResult(True, hours, f"{name} is valid: {hours}", name, bounds)
    return CheckResult(
        False, hours,
        f"{name} should be an integer in the range {MIN_DAY_HOURS}-{MAX_DAY_HOURS}: {hours}",
        name, bounds
    )


def check_doy(doy, name: str = "day of the year (doy)") -> CheckResult:
    """
    Check that day of year is an integer in the range 1-366.

    Args:
        doy: Day of year
        name: Label used in the failure message

    Returns:
        CheckResult
    """
    bounds = (MIN_DOY, MAX_DOY)
    if _is_integer(doy) and MIN_DOY <= doy <= MAX_DOY:
        return CheckResult(True, doy, f"{name} is valid: {doy}", name, bounds)
    return CheckResult(
        False, doy,
        f"{name} should be an integer in the range {MIN_DOY}-{MAX_DOY}: {doy}",
        name, bounds
    )


def _check_number_range(value, name: str, lower: float, upper: float) -> CheckResult:
    bounds = (lower, upper)
    if _is_number(value) and lower <= value <= upper:
        return CheckResult(True, value, f"{name} is valid: {value}", name, bounds)
    return CheckResult(
        False, value,
        f"{name} should be a number in the range {lower} to {upper}: {value}",
        name, bounds
    )


def check_latitude_rad(latitude, name: str = "latitude") -> CheckResult:
    """
    Check latitude (radians) is within [-pi/2, pi/2].

    Args:
        latitude: Latitude in radians
        name: Label used in the failure message

    Returns:
        CheckResult
    """
    return _check_number_range(latitude, name, MIN_LATITUDE_RAD, MAX_LATITUDE_RAD)


def check_sol_dec_rad(sd, name: str = "solar declination") -> CheckResult:
    """
    Check solar declination (radians) is within +/-23.5 degrees.

    Args:
        sd: Solar declination in radians
        name: Label used in the failure message

    Returns:
        CheckResult
    """
    return _check_number_range(sd, name, MIN_SOL_DEC_RAD, MAX_SOL_DEC_RAD)


def check_sunset_hour_angle_rad(sha, name: str = "sunset hour angle") -> CheckResult:
    """
    Check sunset hour angle (radians) is within [0, pi].

    Args:
        sha: Sunset hour angle in radians
        name: Label used in the failure message

    Returns:
        CheckResult
    """
    return _check_number_range(sha, name, MIN_SHA_RAD, MAX_SHA_RAD)


def evaluate(func: Callable, *args, **kwargs) -> CheckResult:
    """
    Run a formula and return its outcome as a CheckResult.

    Library errors (range violations, domain errors, unknown psychrometer
    types) become a failed result carrying the error; anything else
    propagates. Useful when many records are processed and a bad one should
    be flagged rather than abort the run.

    Args:
        func: Formula to call
        *args: Positional arguments for the formula
        **kwargs: Keyword arguments for the formula

    Returns:
        CheckResult with the formula's return value, or the captured error

    Example:
        >>> result = evaluate(hargreaves, 20.0, 10.0, 15.0, 18.8)
        >>> result.is_valid
        False
    """
    name = getattr(func, "__name__", repr(func))
    try:
        value = func(*args, **kwargs)
    except EToError as e:
        Logger.debug(f"{name} failed: {create_error_context(e, {'formula': name})}")
        return CheckResult(
            False, None, str(e),
            parameter=getattr(e, "parameter", None),
            bounds=getattr(e, "bounds", None),
            error=e
        )
    return CheckResult(True, value, f"{name} evaluated", parameter=name)


# Import Logger for warning messages
from .logger import Logger
