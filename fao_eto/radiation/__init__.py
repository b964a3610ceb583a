"""Radiation module: solar geometry, incoming and net radiation."""

from .solar import (
    sol_dec,
    inv_rel_dist_earth_sun,
    sunset_hour_angle,
    daylight_hours,
    et_rad,
    cs_rad,
    sol_rad_from_sun_hours,
    sol_rad_from_t,
    sol_rad_island,
)
from .net_radiation import net_in_sol_rad, net_out_lw_rad, net_rad

__all__ = [
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
]
