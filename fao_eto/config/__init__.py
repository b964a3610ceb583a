"""Configuration for the FAO-56 reference ET library."""

from .settings import (
    VALIDATION_RANGES,
    FORMULA_DEFAULTS,
    KRS_ADJUSTMENT,
    ANGSTROM,
    LOGGING,
    get_logging_config,
)

__all__ = [
    "VALIDATION_RANGES",
    "FORMULA_DEFAULTS",
    "KRS_ADJUSTMENT",
    "ANGSTROM",
    "LOGGING",
    "get_logging_config",
]
