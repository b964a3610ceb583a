"""Net radiation at the surface of the grass reference crop."""

import numpy as np

from ..config.settings import FORMULA_DEFAULTS
from ..core.constants import STEFAN_BOLTZMANN_DAY
from ..utils.exceptions import handle_math_errors


@handle_math_errors
def net_in_sol_rad(sol_rad: float, albedo: float = FORMULA_DEFAULTS["albedo"]) -> float:
    """
    Calculate net incoming solar (shortwave) radiation (eq. 38).

    Args:
        sol_rad: Gross incoming solar radiation (MJ m-2 day-1)
        albedo: Albedo of the crop, 0.23 for the grass reference crop

    Returns:
        Net incoming solar radiation (MJ m-2 day-1)
    """
    return (1 - albedo) * sol_rad


@handle_math_errors
def net_out_lw_rad(tmin: float, tmax: float, sol_rad: float, cs_rad: float, avp: float) -> float:
    """
    Estimate net outgoing longwave radiation (eq. 39).

    Stefan-Boltzmann law corrected for humidity (actual vapour pressure)
    and cloudiness (solar radiation relative to clear sky radiation).

    Args:
        tmin: Absolute daily minimum temperature (K)
        tmax: Absolute daily maximum temperature (K)
        sol_rad: Solar radiation (MJ m-2 day-1)
        cs_rad: Clear sky radiation (MJ m-2 day-1)
        avp: Actual vapour pressure (kPa)

    Returns:
        Net outgoing longwave radiation (MJ m-2 day-1)

    Raises:
        DomainError: If avp is negative or cs_rad is zero
    """
    tmp1 = STEFAN_BOLTZMANN_DAY * ((tmax ** 4 + tmin ** 4) / 2)
    tmp2 = 0.34 - (0.14 * np.sqrt(avp))
    tmp3 = 1.35 * (sol_rad / cs_rad) - 0.35
    return tmp1 * tmp2 * tmp3


@handle_math_errors
def net_rad(ni_sw_rad: float, no_lw_rad: float) -> float:
    """
    Calculate daily net radiation at the crop surface (eq. 40).

    Args:
        ni_sw_rad: Net incoming shortwave radiation (MJ m-2 day-1)
        no_lw_rad: Net outgoing longwave radiation (MJ m-2 day-1)

    Returns:
        Daily net radiation (MJ m-2 day-1)
    """
    return ni_sw_rad - no_lw_rad
