"""
Unit conversion helpers.

Plain arithmetic with no validation: any number goes in, a number comes out.
"""

from .constants import CELSIUS_TO_KELVIN, DEG_TO_RAD, RAD_TO_DEG, KPH_TO_MPS


def celsius_to_kelvin(celsius: float) -> float:
    """Convert temperature in degrees Celsius to degrees Kelvin."""
    return celsius + CELSIUS_TO_KELVIN


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert temperature in degrees Kelvin to degrees Celsius."""
    return kelvin - CELSIUS_TO_KELVIN


def deg_to_rad(degrees: float) -> float:
    """
    Convert angular degrees to radians.

    Args:
        degrees: Value in degrees

    Returns:
        Value in radians
    """
    return degrees * DEG_TO_RAD


def rad_to_deg(radians: float) -> float:
    """
    Convert radians to angular degrees.

    Args:
        radians: Value in radians

    Returns:
        Value in degrees
    """
    return radians * RAD_TO_DEG


def kph_to_mps(kph: float) -> float:
    """Convert km/hr to m/s."""
    return kph * KPH_TO_MPS
