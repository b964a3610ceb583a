"""
Pytest configuration and fixtures for FAO-56 reference ET tests.

Fixtures hold the inputs of the worked examples in Allen et al. (1998).
"""

import pytest
import sys
from pathlib import Path

from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def example_8():
    """Extraterrestrial radiation at 20 deg S on 3 September (Example 8, Ra = 32.2)."""
    return {
        "latitude_deg": -20.0,
        "day_of_year": 246,
        "sol_dec": 0.120,
        "sha": 1.527,
        "ird": 0.985,
        "et_rad": 32.2,
    }


@pytest.fixture
def example_11():
    """Net longwave radiation in Rio de Janeiro, May (Example 11, Rnl = 3.5)."""
    return {
        "tmin_k": 19.1 + 273.15,
        "tmax_k": 25.1 + 273.15,
        "sol_rad": 14.5,
        "cs_rad": 18.8,
        "avp": 2.1,
        "net_out_lw_rad": 3.5,
    }


@pytest.fixture
def example_18():
    """Daily ETo in Brussels on 6 July (Example 18, ETo = 3.9 mm/day)."""
    return {
        "net_rad": 13.28,
        "t": 16.9 + 273,
        "ws": 2.078,
        "svp": 1.997,
        "avp": 1.409,
        "delta_svp": 0.122,
        "psy": 0.0666,
        "eto": 3.9,
    }


@pytest.fixture
def log_messages():
    """Capture library log messages at DEBUG level."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    logger.enable("fao_eto")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Keep library logging silent between tests."""
    yield
    logger.disable("fao_eto")
