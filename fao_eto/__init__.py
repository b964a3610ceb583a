"""
FAO-56 reference evapotranspiration - Python implementation of the
closed-form equations of Allen et al. (1998).

Estimates reference evapotranspiration (ETo) for a grass reference crop
with the FAO-56 Penman-Monteith and Hargreaves equations, plus the
formulas needed to estimate their inputs from routine weather data.

This package provides tools for:
- Unit conversion (temperature, angle, speed)
- Range validation of latitude, solar declination, sunset hour angle,
  day of year and hour counts
- Solar geometry, incoming and net radiation
- Atmospheric pressure, psychrometric constant and vapour pressure
- Reference ET estimators

Every function is pure and works on scalars. Composition is left to the
caller, e.g. ``sol_dec`` -> ``sunset_hour_angle`` -> ``et_rad`` ->
``hargreaves``.

References:
    Allen, R.G., Pereira, L.S., Raes, D. and Smith, M. (1998). Crop
    evapotranspiration - Guidelines for computing crop water requirements.
    FAO Irrigation and Drainage Paper 56.
"""

__version__ = "1.0.0"
__author__ = "FAO ETo Developers"

# Core modules
from fao_eto.core import (
    constants,
    celsius_to_kelvin,
    kelvin_to_celsius,
    deg_to_rad,
    rad_to_deg,
    kph_to_mps,
)

# Validation and errors
from fao_eto.utils import (
    Logger,
    CheckResult,
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
    evaluate,
    EToError,
    InputRangeError,
    PsychrometerTypeError,
    ComputationError,
    DomainError,
    ConfigurationError,
)

# Radiation
from fao_eto.radiation import (
    sol_dec,
    inv_rel_dist_earth_sun,
    sunset_hour_angle,
    daylight_hours,
    et_rad,
    cs_rad,
    sol_rad_from_sun_hours,
    sol_rad_from_t,
    sol_rad_island,
    net_in_sol_rad,
    net_out_lw_rad,
    net_rad,
)

# Meteorology
from fao_eto.meteo import (
    Psychrometer,
    atm_pressure,
    psy_const,
    psy_const_of_psychrometer,
    daily_mean_t,
    wind_speed_2m,
    svp_from_t,
    mean_svp,
    delta_svp,
    avp_from_tdew,
    avp_from_twet_tdry,
    avp_from_rhmin_rhmax,
    avp_from_rhmax,
    avp_from_rhmean,
    avp_from_tmin,
    rh_from_avp_svp,
)

# Reference ET
from fao_eto.et import (
    fao56_penman_monteith,
    hargreaves,
    energy_to_evap,
    monthly_soil_heat_flux,
    monthly_soil_heat_flux2,
)

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Core
    'constants',
    'celsius_to_kelvin',
    'kelvin_to_celsius',
    'deg_to_rad',
    'rad_to_deg',
    'kph_to_mps',

    # Validation and errors
    'Logger',
    'CheckResult',
    'check_day_hours',
    'check_doy',
    'check_latitude_rad',
    'check_sol_dec_rad',
    'check_sunset_hour_angle_rad',
    'evaluate',
    'EToError',
    'InputRangeError',
    'PsychrometerTypeError',
    'ComputationError',
    'DomainError',
    'ConfigurationError',

    # Radiation
    'sol_dec',
    'inv_rel_dist_earth_sun',
    'sunset_hour_angle',
    'daylight_hours',
    'et_rad',
    'cs_rad',
    'sol_rad_from_sun_hours',
    'sol_rad_from_t',
    'sol_rad_island',
    'net_in_sol_rad',
    'net_out_lw_rad',
    'net_rad',

    # Meteorology
    'Psychrometer',
    'atm_pressure',
    'psy_const',
    'psy_const_of_psychrometer',
    'daily_mean_t',
    'wind_speed_2m',
    'svp_from_t',
    'mean_svp',
    'delta_svp',
    'avp_from_tdew',
    'avp_from_twet_tdry',
    'avp_from_rhmin_rhmax',
    'avp_from_rhmax',
    'avp_from_rhmean',
    'avp_from_tmin',
    'rh_from_avp_svp',

    # Reference ET
    'fao56_penman_monteith',
    'hargreaves',
    'energy_to_evap',
    'monthly_soil_heat_flux',
    'monthly_soil_heat_flux2',
]
