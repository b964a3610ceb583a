"""
Saturation and actual vapour pressure, relative humidity.

The ``avp_from_*`` functions are listed roughly in order of preference:
dewpoint, psychrometric data, relative humidity, then minimum temperature
when humidity data are missing altogether.
"""

import numpy as np

from ..utils.exceptions import handle_math_errors


@handle_math_errors
def svp_from_t(t: float) -> float:
    """
    Estimate saturation vapour pressure (*es*) from air temperature (eq. 11).

    Args:
        t: Temperature (deg C)

    Returns:
        Saturation vapour pressure (kPa)
    """
    return 0.6108 * np.exp((17.27 * t) / (t + 237.3))


@handle_math_errors
def mean_svp(tmin: float, tmax: float) -> float:
    """
    Estimate mean saturation vapour pressure from min and max temperature (eq. 12).

    Using the mean of tmin and tmax instead underestimates *es* because the
    curve is non-linear.

    Args:
        tmin: Minimum temperature (deg C)
        tmax: Maximum temperature (deg C)

    Returns:
        Mean saturation vapour pressure (kPa)
    """
    return (svp_from_t(tmin) + svp_from_t(tmax)) / 2.0


@handle_math_errors
def delta_svp(t: float) -> float:
    """
    Estimate the slope of the saturation vapour pressure curve at temperature *t* (eq. 13).

    For FAO-56 Penman-Monteith use the mean air temperature.

    Args:
        t: Air temperature (deg C)

    Returns:
        Slope of the saturation vapour pressure curve (kPa degC-1)
    """
    tmp = 4098 * (0.6108 * np.exp((17.27 * t) / (t + 237.3)))
    return tmp / np.power(t + 237.3, 2)


@handle_math_errors
def avp_from_tdew(tdew: float) -> float:
    """
    Estimate actual vapour pressure (*ea*) from dewpoint temperature (eq. 14).

    Args:
        tdew: Dewpoint temperature (deg C)

    Returns:
        Actual vapour pressure (kPa)
    """
    return 0.6108 * np.exp((17.27 * tdew) / (tdew + 237.3))


@handle_math_errors
def avp_from_twet_tdry(twet: float, tdry: float, svp_twet: float, psy_const: float) -> float:
    """
    Estimate actual vapour pressure from wet and dry bulb temperature (eq. 15).

    Args:
        twet: Wet bulb temperature (deg C)
        tdry: Dry bulb temperature (deg C)
        svp_twet: Saturated vapour pressure at the wet bulb temperature (kPa)
        psy_const: Psychrometric constant of the psychrometer (kPa degC-1),
            see ``psy_const_of_psychrometer()``

    Returns:
        Actual vapour pressure (kPa)
    """
    return svp_twet - (psy_const * (tdry - twet))


@handle_math_errors
def avp_from_rhmin_rhmax(svp_tmin: float, svp_tmax: float, rh_min: float, rh_max: float) -> float:
    """
    Estimate actual vapour pressure from saturation vapour pressure and relative humidity (eq. 17).

    Args:
        svp_tmin: Saturation vapour pressure at daily minimum temperature (kPa)
        svp_tmax: Saturation vapour pressure at daily maximum temperature (kPa)
        rh_min: Minimum relative humidity (%)
        rh_max: Maximum relative humidity (%)

    Returns:
        Actual vapour pressure (kPa)
    """
    tmp1 = svp_tmin * (rh_max / 100.0)
    tmp2 = svp_tmax * (rh_min / 100.0)
    return (tmp1 + tmp2) / 2.0


@handle_math_errors
def avp_from_rhmax(svp_tmin: float, rh_max: float) -> float:
    """
    Estimate actual vapour pressure from maximum relative humidity (eq. 18).

    Use when errors in *rh_min* measurements are large.

    Args:
        svp_tmin: Saturation vapour pressure at daily minimum temperature (kPa)
        rh_max: Maximum relative humidity (%)

    Returns:
        Actual vapour pressure (kPa)
    """
    return svp_tmin * (rh_max / 100.0)


@handle_math_errors
def avp_from_rhmean(svp_tmin: float, svp_tmax: float, rh_mean: float) -> float:
    """
    Estimate actual vapour pressure from mean relative humidity (eq. 19).

    Less reliable than ``avp_from_rhmin_rhmax`` or ``avp_from_rhmax``.

    Args:
        svp_tmin: Saturation vapour pressure at daily minimum temperature (kPa)
        svp_tmax: Saturation vapour pressure at daily maximum temperature (kPa)
        rh_mean: Mean relative humidity (%)

    Returns:
        Actual vapour pressure (kPa)
    """
    return (rh_mean / 100.0) * ((svp_tmax + svp_tmin) / 2.0)


@handle_math_errors
def avp_from_tmin(tmin: float) -> float:
    """
    Estimate actual vapour pressure from minimum temperature (eq. 48).

    Assumes the dewpoint is close to *tmin*. In arid areas subtract about
    2 deg C from *tmin* first (FAO-56 Annex 6).

    Args:
        tmin: Daily minimum temperature (deg C)

    Returns:
        Actual vapour pressure (kPa)
    """
    return 0.611 * np.exp((17.27 * tmin) / (tmin + 237.3))


@handle_math_errors
def rh_from_avp_svp(avp: float, svp: float) -> float:
    """
    Calculate relative humidity from actual and saturation vapour pressure (eq. 10).

    Args:
        avp: Actual vapour pressure (kPa)
        svp: Saturation vapour pressure (kPa)

    Returns:
        Relative humidity (%)
    """
    return 100.0 * avp / svp
