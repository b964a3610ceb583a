"""
Utility modules for the FAO-56 reference ET library.

Provides logging, validation, and exception handling utilities.
"""

from .logger import Logger
from .validation import (
    CheckResult,
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
    evaluate,
)
from .exceptions import (
    EToError,
    InputRangeError,
    PsychrometerTypeError,
    ComputationError,
    DomainError,
    ConfigurationError,
    handle_math_errors,
    create_error_context,
)

__all__ = [
    # Logger
    "Logger",

    # Validation
    "CheckResult",
    "check_day_hours",
    "check_doy",
    "check_latitude_rad",
    "check_sol_dec_rad",
    "check_sunset_hour_angle_rad",
    "evaluate",

    # Exceptions
    "EToError",
    "InputRangeError",
    "PsychrometerTypeError",
    "ComputationError",
    "DomainError",
    "ConfigurationError",
    "handle_math_errors",
    "create_error_context",
]
