"""Reference evapotranspiration module."""

from .reference_et import fao56_penman_monteith, hargreaves, energy_to_evap
from .soil_heat_flux import monthly_soil_heat_flux, monthly_soil_heat_flux2

__all__ = [
    'fao56_penman_monteith',
    'hargreaves',
    'energy_to_evap',
    'monthly_soil_heat_flux',
    'monthly_soil_heat_flux2',
]
