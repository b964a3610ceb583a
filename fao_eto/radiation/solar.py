"""
Solar geometry and incoming solar radiation for FAO-56 reference ET.

Equation numbers refer to Allen et al. (1998), FAO Irrigation and Drainage
Paper 56, chapter 3.
"""

import numpy as np

from ..config.settings import ANGSTROM, KRS_ADJUSTMENT
from ..core.constants import DAYS_PER_YEAR, HOURS_PER_DAY, MINUTES_PER_DAY, SOLAR_CONSTANT
from ..utils.exceptions import DomainError, handle_math_errors
from ..utils.logger import Logger
from ..utils.validation import (
    check_day_hours,
    check_doy,
    check_latitude_rad,
    check_sol_dec_rad,
    check_sunset_hour_angle_rad,
)


@handle_math_errors
def sol_dec(day_of_year: int) -> float:
    """
    Calculate solar declination from day of the year (eq. 24).

    Args:
        day_of_year: Day of year integer between 1 and 365 or 366

    Returns:
        Solar declination (radians)

    Raises:
        InputRangeError: If day_of_year is not an integer in 1-366
    """
    day_of_year = check_doy(day_of_year).unwrap()
    return 0.409 * np.sin((2.0 * np.pi / DAYS_PER_YEAR) * day_of_year - 1.39)


@handle_math_errors
def inv_rel_dist_earth_sun(day_of_year: int) -> float:
    """
    Calculate the inverse relative distance between earth and sun (eq. 23).

    Args:
        day_of_year: Day of year integer between 1 and 365 or 366

    Returns:
        Inverse relative distance between earth and sun (dimensionless)

    Raises:
        InputRangeError: If day_of_year is not an integer in 1-366
    """
    day_of_year = check_doy(day_of_year).unwrap()
    return 1 + 0.033 * np.cos((2.0 * np.pi / DAYS_PER_YEAR) * day_of_year)


@handle_math_errors
def sunset_hour_angle(latitude: float, sol_dec: float) -> float:
    """
    Calculate sunset hour angle (*Ws*) from latitude and solar declination (eq. 25).

    At high latitudes the argument of arccos leaves [-1, 1] (polar day or
    night); it is clipped so the result stays within [0, pi].

    Args:
        latitude: Latitude (radians). Negative for the southern hemisphere
        sol_dec: Solar declination (radians), see ``sol_dec()``

    Returns:
        Sunset hour angle (radians)

    Raises:
        InputRangeError: If latitude or solar declination is out of range
    """
    latitude = check_latitude_rad(latitude).unwrap()
    sol_dec = check_sol_dec_rad(sol_dec).unwrap()

    cos_sha = -np.tan(latitude) * np.tan(sol_dec)
    clipped = np.clip(cos_sha, -1.0, 1.0)
    if clipped != cos_sha:
        Logger.debug(f"cos(sunset hour angle) {cos_sha:.4f} clipped to {clipped:.0f} (polar day/night)")
    return np.arccos(clipped)


@handle_math_errors
def daylight_hours(sha: float) -> float:
    """
    Calculate daylight hours from sunset hour angle (eq. 34).

    Args:
        sha: Sunset hour angle (radians), see ``sunset_hour_angle()``

    Returns:
        Daylight hours
    """
    sha = check_sunset_hour_angle_rad(sha).unwrap()
    return (HOURS_PER_DAY / np.pi) * sha


@handle_math_errors
def et_rad(latitude: float, sol_dec: float, sha: float, ird: float) -> float:
    """
    Estimate daily extraterrestrial radiation (*Ra*, 'top of the atmosphere radiation').

    Based on equation 21 in Allen et al (1998). If monthly mean radiation is
    required make sure *sol_dec*, *sha* and *ird* have been calculated using
    the day of the year that corresponds to the middle of the month.

    Args:
        latitude: Latitude (radians)
        sol_dec: Solar declination (radians), see ``sol_dec()``
        sha: Sunset hour angle (radians), see ``sunset_hour_angle()``
        ird: Inverse relative distance earth-sun, see ``inv_rel_dist_earth_sun()``

    Returns:
        Daily extraterrestrial radiation (MJ m-2 day-1)

    Raises:
        InputRangeError: If latitude, solar declination or sunset hour angle
            is out of range
    """
    latitude = check_latitude_rad(latitude).unwrap()
    sol_dec = check_sol_dec_rad(sol_dec).unwrap()
    sha = check_sunset_hour_angle_rad(sha).unwrap()

    tmp1 = MINUTES_PER_DAY / np.pi
    tmp2 = sha * np.sin(latitude) * np.sin(sol_dec)
    tmp3 = np.cos(latitude) * np.cos(sol_dec) * np.sin(sha)
    return tmp1 * SOLAR_CONSTANT * ird * (tmp2 + tmp3)


@handle_math_errors
def cs_rad(altitude: float, et_rad: float) -> float:
    """
    Estimate clear sky radiation from altitude and extraterrestrial radiation (eq. 37).

    Args:
        altitude: Elevation above sea level (m)
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Clear sky radiation (MJ m-2 day-1)
    """
    return (0.00002 * altitude + 0.75) * et_rad


@handle_math_errors
def sol_rad_from_sun_hours(daylight_hours: int, sunshine_hours: int, et_rad: float) -> float:
    """
    Calculate incoming solar (shortwave) radiation from sunshine hours (eq. 35).

    Uses the Angstrom values recommended by Allen et al (1998) where no
    local calibration is available.

    Args:
        daylight_hours: Maximum possible hours of sunshine, see ``daylight_hours()``
        sunshine_hours: Measured hours of bright sunshine
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Incoming solar radiation (MJ m-2 day-1)

    Raises:
        InputRangeError: If either hour count is not an integer in 0-24
        DomainError: If daylight_hours is zero
    """
    sunshine_hours = check_day_hours(sunshine_hours, "sunshine_hours").unwrap()
    daylight_hours = check_day_hours(daylight_hours, "daylight_hours").unwrap()

    if daylight_hours == 0:
        Logger.warning("daylight_hours is 0, relative sunshine duration is undefined")
        raise DomainError(
            "daylight_hours must be greater than 0 to compute relative sunshine duration",
            formula="sol_rad_from_sun_hours",
            arguments={"daylight_hours": daylight_hours, "sunshine_hours": sunshine_hours}
        )

    return (ANGSTROM["b_s"] * sunshine_hours / daylight_hours + ANGSTROM["a_s"]) * et_rad


@handle_math_errors
def sol_rad_from_t(et_rad: float, cs_rad: float, tmin: float, tmax: float, coastal: bool) -> float:
    """
    Estimate incoming solar radiation from the daily temperature range (eq. 50).

    Hargreaves' radiation formula for when sunshine data are missing. The
    result is capped at clear sky radiation.

    Args:
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)
        cs_rad: Clear sky radiation (MJ m-2 day-1)
        tmin: Daily minimum temperature (deg C)
        tmax: Daily maximum temperature (deg C)
        coastal: True if the site is coastal, False for interior locations

    Returns:
        Incoming solar radiation (MJ m-2 day-1)

    Raises:
        DomainError: If tmax is lower than tmin
    """
    if tmax < tmin:
        Logger.warning(f"sol_rad_from_t rejected tmax={tmax} < tmin={tmin}")
        raise DomainError(
            f"tmax ({tmax}) must not be lower than tmin ({tmin})",
            formula="sol_rad_from_t",
            arguments={"tmin": tmin, "tmax": tmax}
        )

    adj = KRS_ADJUSTMENT["coastal"] if coastal else KRS_ADJUSTMENT["interior"]
    sol_rad = adj * np.sqrt(tmax - tmin) * et_rad

    if sol_rad > cs_rad:
        Logger.debug(f"Solar radiation {sol_rad:.3f} capped at clear sky radiation {cs_rad:.3f}")
    return min(sol_rad, cs_rad)


@handle_math_errors
def sol_rad_island(et_rad: float) -> float:
    """
    Estimate incoming solar radiation on islands (eq. 51).

    Only valid for island locations with elevation below 100 m and a land
    mass of less than 20 km along the direction of the prevailing wind.

    Args:
        et_rad: Extraterrestrial radiation (MJ m-2 day-1)

    Returns:
        Incoming solar radiation (MJ m-2 day-1)
    """
    return (0.7 * et_rad) - 4.0
