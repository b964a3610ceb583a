"""
Unit tests for meteorological formulas.

Tests atmospheric pressure, psychrometric constant, wind and vapour pressure.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from fao_eto.utils.exceptions import DomainError, PsychrometerTypeError
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


class TestAtmosphere:
    """Test pressure and psychrometric constant."""

    def test_atm_pressure(self):
        """Example 2: 1800 m gives 81.8 kPa."""
        assert abs(atm_pressure(1800) - 81.8) < 0.1

    def test_atm_pressure_sea_level(self):
        assert abs(atm_pressure(0) - 101.3) < 1e-9

    def test_psy_const(self):
        """Example 2: 81.8 kPa gives 0.054 kPa/degC."""
        assert abs(psy_const(81.8) - 0.054) < 0.001

    @pytest.mark.parametrize("psychrometer, expected", [
        (1, 0.000662 * 81.8),
        (2, 0.000800 * 81.8),
        (3, 0.001200 * 81.8),
        (Psychrometer.NATURAL, 0.000800 * 81.8),
    ])
    def test_psy_const_of_psychrometer(self, psychrometer, expected):
        assert abs(psy_const_of_psychrometer(psychrometer, 81.8) - expected) < 1e-12

    def test_ventilated_psychrometer(self):
        assert abs(psy_const_of_psychrometer(1, 81.8) - 0.05415) < 1e-5

    @pytest.mark.parametrize("psychrometer", [0, 4, -1, True, "1", None, 1.0, np.float64(2.0), [1]])
    def test_unknown_psychrometer(self, psychrometer):
        with pytest.raises(PsychrometerTypeError) as excinfo:
            psy_const_of_psychrometer(psychrometer, 81.8)
        assert excinfo.value.psychrometer is psychrometer

    def test_numpy_integer_psychrometer(self):
        assert psy_const_of_psychrometer(np.int64(2), 81.8) == psy_const_of_psychrometer(2, 81.8)

    @pytest.mark.parametrize("atmos_pres", [float("nan"), float("inf")])
    def test_psy_const_of_psychrometer_non_finite(self, atmos_pres):
        with pytest.raises(DomainError):
            psy_const_of_psychrometer(Psychrometer.VENTILATED, atmos_pres)

    def test_unknown_psychrometer_message(self):
        with pytest.raises(PsychrometerTypeError, match="psychrometer should be in range 1 to 3: 4"):
            psy_const_of_psychrometer(4, 81.8)

    def test_daily_mean_t(self):
        assert daily_mean_t(12, 26) == 19.0


class TestWindSpeed:
    """Test wind speed adjustment to 2 m."""

    def test_wind_speed_2m_example_14(self):
        """Example 14: 3.2 m/s at 10 m gives 2.4 m/s at 2 m."""
        assert abs(wind_speed_2m(3.2, 10) - 2.393) < 0.01

    def test_wind_speed_at_2m_unchanged(self):
        assert abs(wind_speed_2m(2.0, 2.0) - 2.0) < 0.001

    @pytest.mark.parametrize("z", [0.05, 0.07, 0.0])
    def test_wind_speed_2m_invalid_height(self, z):
        with pytest.raises(DomainError):
            wind_speed_2m(3.2, z)


class TestVapourPressure:
    """Test saturation and actual vapour pressure."""

    def test_svp_from_t(self):
        """Table 2.3: 25 degC gives 3.168 kPa."""
        assert abs(svp_from_t(25.0) - 3.168) < 0.001

    def test_mean_svp(self):
        """Example 3: tmin 15, tmax 24.5 gives 2.39 kPa."""
        assert abs(mean_svp(15.0, 24.5) - 2.39) < 0.005

    def test_mean_svp_exceeds_svp_of_mean(self):
        assert mean_svp(15.0, 24.5) > svp_from_t(daily_mean_t(15.0, 24.5))

    def test_delta_svp(self):
        """Table 2.4: 25 degC gives 0.189 kPa/degC."""
        assert abs(delta_svp(25.0) - 0.189) < 0.001

    def test_delta_svp_singularity(self):
        with pytest.raises(DomainError):
            delta_svp(-237.3)

    def test_avp_from_tdew(self):
        """Example 4: dewpoint 17 degC gives 1.938 kPa."""
        assert abs(avp_from_tdew(17.0) - 1.938) < 0.001

    def test_avp_from_twet_tdry(self):
        """Example 4: aspirated psychrometer at 1200 m."""
        psy = 0.000662 * 87.9
        assert abs(avp_from_twet_tdry(19.5, 25.6, 2.267, psy) - 1.912042) < 1e-5

    def test_avp_from_rhmin_rhmax(self):
        """Example 5: RHmax 82 %, RHmin 54 % gives 1.70 kPa."""
        assert abs(avp_from_rhmin_rhmax(2.064, 3.168, 54, 82) - 1.7016) < 1e-9

    def test_avp_from_rhmax(self):
        assert abs(avp_from_rhmax(2.064, 82) - 1.69248) < 1e-9

    def test_avp_from_rhmean(self):
        assert abs(avp_from_rhmean(2.064, 3.168, 68) - 1.77888) < 1e-9

    def test_avp_from_tmin(self):
        assert abs(avp_from_tmin(10.0) - 1.228) < 0.001

    def test_rh_from_avp_svp(self):
        assert abs(rh_from_avp_svp(1.5, 3.0) - 50.0) < 1e-9

    def test_rh_from_zero_svp(self):
        with pytest.raises(DomainError):
            rh_from_avp_svp(1.5, 0.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
