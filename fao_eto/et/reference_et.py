"""
Reference evapotranspiration (ETo) for the hypothetical grass reference crop.

Two estimators are provided:
- FAO-56 Penman-Monteith (eq. 6), the recommended method
- Hargreaves (eq. 52), for when only temperature data are available

Neither computes its own inputs: the caller derives net radiation, vapour
pressures, the slope of the vapour pressure curve and the psychrometric
constant with the functions of ``fao_eto.radiation`` and ``fao_eto.meteo``.
"""

import numpy as np

from ..config.settings import FORMULA_DEFAULTS
from ..core.constants import MJ_M2_DAY_TO_MM_DAY
from ..utils.exceptions import DomainError, handle_math_errors
from ..utils.logger import Logger


@handle_math_errors
def fao56_penman_monteith(
    net_rad: float,
    t: float,
    ws: float,
    svp: float,
    avp: float,
    delta_svp: float,
    psy: float,
    shf: float = FORMULA_DEFAULTS["soil_heat_flux"]
) -> float:
    """
    Estimate ETo from a short grass reference surface with FAO-56 Penman-Monteith.

    .. math:: ETo = \\frac{0.408 \\Delta (R_n - G) + \\gamma \\frac{900}{T} u_2
        (e_s - e_a)}{\\Delta + \\gamma (1 + 0.34 u_2)}

    Inputs are not range-checked: no physical bounds are well defined for
    all of them.

    Args:
        net_rad: Net radiation at crop surface (MJ m-2 day-1), see ``net_rad()``
        t: Air temperature at 2 m height (K)
        ws: Wind speed at 2 m height (m s-1), see ``wind_speed_2m()``
        svp: Saturation vapour pressure (kPa), see ``svp_from_t()``
        avp: Actual vapour pressure (kPa), see the ``avp_from_*`` functions
        delta_svp: Slope of saturation vapour pressure curve (kPa degC-1)
        psy: Psychrometric constant (kPa degC-1)
        shf: Soil heat flux G (MJ m-2 day-1). 0.0 is reasonable for daily or
            10-day steps; for monthly steps see ``monthly_soil_heat_flux()``

    Returns:
        Reference evapotranspiration ETo (mm day-1)

    Raises:
        DomainError: If the denominator or the temperature is zero
    """
    denominator = delta_svp + (psy * (1 + 0.34 * ws))
    if denominator == 0 or t == 0:
        raise DomainError(
            "Penman-Monteith is undefined for a zero denominator or zero absolute temperature",
            formula="fao56_penman_monteith",
            arguments={"t": t, "ws": ws, "delta_svp": delta_svp, "psy": psy}
        )

    a1 = (0.408 * (net_rad - shf) * delta_svp) / denominator
    a2 = (900 * ws / t) * (svp - avp) * psy / denominator
    return a1 + a2


@handle_math_errors
def hargreaves(tmin: float, tmax: float, tmean: float, et_rad: float) -> float:
    """
    Estimate ETo over grass with the Hargreaves equation (eq. 52).

    Prefer estimating missing radiation, humidity and wind data and using
    ``fao56_penman_monteith``; Hargreaves is the fallback when only
    temperatures are known.

    Args:
        tmin: Minimum daily temperature (deg C)
        tmax: Maximum daily temperature (deg C)
        tmean: Mean daily temperature (deg C), see ``daily_mean_t()``
        et_rad: Extraterrestrial radiation Ra (MJ m-2 day-1), see ``et_rad()``

    Returns:
        Reference evapotranspiration ETo (mm day-1)

    Raises:
        DomainError: If tmax is lower than tmin
    """
    if tmax < tmin:
        Logger.warning(f"hargreaves rejected tmax={tmax} < tmin={tmin}")
        raise DomainError(
            f"tmax ({tmax}) must not be lower than tmin ({tmin})",
            formula="hargreaves",
            arguments={"tmin": tmin, "tmax": tmax}
        )
    return 0.0023 * (tmean + 17.8) * np.sqrt(tmax - tmin) * MJ_M2_DAY_TO_MM_DAY * et_rad


@handle_math_errors
def energy_to_evap(energy: float) -> float:
    """
    Convert energy (e.g. radiation energy) in MJ m-2 day-1 to equivalent evaporation in mm day-1 (eq. 20).

    Args:
        energy: Energy (MJ m-2 day-1)

    Returns:
        Equivalent evaporation (mm day-1)
    """
    return MJ_M2_DAY_TO_MM_DAY * energy
