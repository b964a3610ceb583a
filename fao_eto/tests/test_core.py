"""
Unit tests for core module of the FAO-56 reference ET library.

Tests constants and unit conversion.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestConstants:
    """Test physical constants are correct."""

    def test_solar_constant(self):
        """Test solar constant in MJ m-2 min-1."""
        from fao_eto.core.constants import SOLAR_CONSTANT
        assert SOLAR_CONSTANT == 0.0820

    def test_stefan_boltzmann_daily(self):
        """Test daily Stefan-Boltzmann constant."""
        from fao_eto.core.constants import STEFAN_BOLTZMANN_DAY
        assert abs(STEFAN_BOLTZMANN_DAY - 4.903e-9) < 1e-15

    def test_kelvin_offset(self):
        """Test Kelvin to Celsius offset."""
        from fao_eto.core.constants import CELSIUS_TO_KELVIN
        assert CELSIUS_TO_KELVIN == 273.15

    def test_degrees_to_radians(self):
        """Test degree to radian conversion constant."""
        from fao_eto.core.constants import DEG_TO_RAD
        assert abs(DEG_TO_RAD - np.pi / 180.0) < 1e-15


class TestTemperatureConversion:
    """Test Celsius/Kelvin conversion."""

    def test_celsius_to_kelvin(self):
        from fao_eto.core.conversion import celsius_to_kelvin
        assert abs(celsius_to_kelvin(20) - 293.15) < 1e-9
        assert abs(celsius_to_kelvin(-273.15)) < 1e-9

    def test_kelvin_to_celsius(self):
        from fao_eto.core.conversion import kelvin_to_celsius
        assert abs(kelvin_to_celsius(293.15) - 20.0) < 1e-9

    def test_no_validation_on_unphysical_values(self):
        """Values below absolute zero are converted, not rejected."""
        from fao_eto.core.conversion import kelvin_to_celsius
        assert abs(kelvin_to_celsius(-10.0) - (-283.15)) < 1e-9

    @pytest.mark.parametrize("value", [-500.0, -40.0, 0.0, 21.7, 1e6])
    def test_round_trip(self, value):
        from fao_eto.core.conversion import celsius_to_kelvin, kelvin_to_celsius
        assert abs(celsius_to_kelvin(kelvin_to_celsius(value)) - value) < 1e-9


class TestAngleConversion:
    """Test degree/radian conversion."""

    def test_deg_to_rad(self):
        from fao_eto.core.conversion import deg_to_rad
        assert abs(deg_to_rad(180.0) - np.pi) < 1e-12
        assert abs(deg_to_rad(-90.0) + np.pi / 2) < 1e-12

    def test_rad_to_deg(self):
        from fao_eto.core.conversion import rad_to_deg
        assert abs(rad_to_deg(np.pi) - 180.0) < 1e-12

    @pytest.mark.parametrize("value", [-7.5, -1.0, 0.0, 0.409, 3.0, 1234.5])
    def test_round_trip(self, value):
        from fao_eto.core.conversion import deg_to_rad, rad_to_deg
        assert abs(deg_to_rad(rad_to_deg(value)) - value) < 1e-9


class TestSpeedConversion:
    """Test km/h to m/s conversion."""

    def test_kph_to_mps(self):
        from fao_eto.core.conversion import kph_to_mps
        assert abs(kph_to_mps(36) - 10.0) < 1e-9
        assert kph_to_mps(0) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
