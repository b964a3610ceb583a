"""Configuration settings for the FAO-56 reference ET library."""

import os

# ============================================================================
# VALIDATION RANGES
# ============================================================================

# Angles are kept in degrees here and converted to radians once by the
# validation module.
VALIDATION_RANGES = {
    "latitude_deg": (-90.0, 90.0),
    "sol_dec_deg": (-23.5, 23.5),
    "sunset_hour_angle_deg": (0.0, 180.0),
    "day_of_year": (1, 366),
    "day_hours": (0, 24),
}

# ============================================================================
# MODEL DEFAULTS
# ============================================================================

FORMULA_DEFAULTS = {
    # Albedo of the grass reference crop (eq. 38)
    "albedo": 0.23,
    # Soil heat flux for daily or 10-day steps (MJ m-2 day-1)
    "soil_heat_flux": 0.0,
}

# Regression coefficient for solar radiation from temperature (eq. 50)
KRS_ADJUSTMENT = {
    "interior": 0.16,
    "coastal": 0.19,
}

# Angstrom values for solar radiation from sunshine hours (eq. 35)
ANGSTROM = {
    "a_s": 0.25,
    "b_s": 0.50,
}

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LOGGING = {
    "level": "INFO",
    "format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
              "<cyan>{message}</cyan>",
    "log_file": None,
    "rotation": "10 MB",
    "retention": 10,
}


def get_logging_config() -> dict:
    """Build the logging configuration, re-reading environment overrides.

    Returns:
        Copy of ``LOGGING`` with ``level`` and ``log_file`` taken from
        ``FAO_ETO_LOG_LEVEL`` and ``FAO_ETO_LOG_FILE`` when set.

    Raises:
        ConfigurationError: If the requested level is not a loguru level
    """
    from ..utils.exceptions import ConfigurationError

    config = dict(LOGGING)
    config["level"] = os.environ.get("FAO_ETO_LOG_LEVEL", LOGGING["level"]).upper()
    config["log_file"] = os.environ.get("FAO_ETO_LOG_FILE", LOGGING["log_file"])

    if config["level"] not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {config['level']!r}, expected one of {', '.join(LOG_LEVELS)}",
            config_param="FAO_ETO_LOG_LEVEL"
        )
    return config
