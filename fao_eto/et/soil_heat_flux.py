"""Monthly soil heat flux for Penman-Monteith at monthly time steps."""

from ..utils.exceptions import handle_math_errors


@handle_math_errors
def monthly_soil_heat_flux(t_month_prev: float, t_month_next: float) -> float:
    """
    Estimate monthly soil heat flux (Gmonth) from the previous and next month mean air temperatures (eq. 43).

    Assumes a grass crop.

    Args:
        t_month_prev: Mean air temperature of the previous month (deg C)
        t_month_next: Mean air temperature of the next month (deg C)

    Returns:
        Monthly soil heat flux (MJ m-2 day-1)
    """
    return 0.07 * (t_month_next - t_month_prev)


@handle_math_errors
def monthly_soil_heat_flux2(t_month_prev: float, t_month_cur: float) -> float:
    """
    Estimate monthly soil heat flux from the previous and current month mean air temperatures (eq. 44).

    Use when the next month's temperature is not known.

    Args:
        t_month_prev: Mean air temperature of the previous month (deg C)
        t_month_cur: Mean air temperature of the current month (deg C)

    Returns:
        Monthly soil heat flux (MJ m-2 day-1)
    """
    return 0.14 * (t_month_cur - t_month_prev)
