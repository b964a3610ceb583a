"""Meteorology module: atmospheric parameters and vapour pressure."""

from .atmosphere import (
    Psychrometer,
    atm_pressure,
    psy_const,
    psy_const_of_psychrometer,
    daily_mean_t,
    wind_speed_2m,
)
from .vapour_pressure import (
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

__all__ = [
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
]
