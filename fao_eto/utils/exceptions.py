"""
Exceptions raised by the FAO-56 reference ET formulas.

Range violations, usage errors and mathematical domain errors each get
their own class, so callers can catch exactly what they can recover from.
All of them derive from ``EToError`` and carry a ``details`` dict.
"""

from functools import wraps
from typing import Optional

import numpy as np


class EToError(Exception):
    """
    Root of the fao_eto exception hierarchy.

    Attributes:
        message: Human readable description
        details: Offending inputs and context, e.g. parameter name and value
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self):
        if not self.details:
            return self.message
        described = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({described})"

    def add_detail(self, key: str, value) -> None:
        """Attach one more piece of context, e.g. the formula that was running."""
        self.details[key] = value


class InputRangeError(EToError, ValueError):
    """
    A formula input lies outside its physical range.

    Raised by ``CheckResult.unwrap()`` for:
    - Latitude outside [-pi/2, pi/2]
    - Solar declination outside +/-23.5 degrees
    - Sunset hour angle outside [0, pi]
    - Day of year or hour counts that are not integers in range

    The message already names parameter, bounds and value, so ``str()``
    returns it alone.
    """

    def __init__(self, message: str, parameter: Optional[str] = None, value=None,
                 bounds: Optional[tuple] = None):
        details = {"parameter": parameter} if parameter else {}
        if bounds is not None:
            details["bounds"] = bounds
        details["value"] = value
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value
        self.bounds = bounds

    def __str__(self):
        return self.message


class PsychrometerTypeError(EToError, ValueError):
    """Unknown psychrometer type. No default coefficient applies."""

    def __init__(self, message: str, psychrometer=None):
        super().__init__(message, {"psychrometer": psychrometer})
        self.psychrometer = psychrometer


class ComputationError(EToError):
    """A formula failed while computing; ``details["step"]`` names it."""

    def __init__(self, message: str, computation_step: Optional[str] = None,
                 details: Optional[dict] = None):
        details = dict(details or {})
        if computation_step:
            details["step"] = computation_step
        super().__init__(message, details)


class DomainError(ComputationError, ArithmeticError):
    """
    A formula was evaluated outside its mathematical domain.

    Typical causes:
    - tmax lower than tmin under a square root
    - Zero daylight hours or a zero denominator
    - Logarithm of a non-positive wind profile argument
    - A result that is NaN or infinite
    """

    def __init__(self, message: str, formula: Optional[str] = None,
                 arguments: Optional[dict] = None):
        details = {"arguments": arguments} if arguments else None
        super().__init__(message, computation_step=formula, details=details)


class ConfigurationError(EToError):
    """Invalid logging configuration, e.g. an unknown FAO_ETO_LOG_LEVEL."""

    def __init__(self, message: str, config_param: Optional[str] = None):
        super().__init__(message, {"parameter": config_param} if config_param else None)


def handle_math_errors(func):
    """
    Run a formula with floating point errors raised as DomainError.

    numpy divide, invalid and overflow conditions raise instead of warning,
    Python's own ``ZeroDivisionError`` and ``OverflowError`` are converted,
    and a non-finite result is rejected. Finite results are returned as
    plain ``float``. fao_eto exceptions pass through untouched.

    Usage:
        @handle_math_errors
        def wind_log(z):
            return np.log(67.8 * z - 5.42)
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            with np.errstate(divide="raise", invalid="raise", over="raise"):
                result = float(func(*args, **kwargs))
        except EToError:
            raise
        except (ZeroDivisionError, FloatingPointError, OverflowError) as e:
            raise DomainError(
                f"Math domain error in {func.__name__}: {e}",
                formula=func.__name__,
                arguments=_describe_arguments(args, kwargs)
            ) from e

        if not np.isfinite(result):
            raise DomainError(
                f"{func.__name__} produced a non-finite result: {result}",
                formula=func.__name__,
                arguments=_describe_arguments(args, kwargs)
            )
        return result
    return wrapper


def _describe_arguments(args: tuple, kwargs: dict) -> dict:
    described = {f"arg{i}": value for i, value in enumerate(args)}
    described.update(kwargs)
    return described


def create_error_context(error: Exception, context: Optional[dict] = None) -> dict:
    """
    Summarise an error for a log record.

    Args:
        error: The exception that occurred
        context: Extra context, e.g. the formula or record being processed

    Returns:
        Dict with error type, message, details and the extra context
    """
    summary = {"error_type": type(error).__name__, "error_message": str(error)}
    details = getattr(error, "details", None)
    if details is not None:
        summary["error_details"] = details
    if context:
        summary["additional_context"] = context
    return summary
