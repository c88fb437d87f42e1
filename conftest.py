"""
Root conftest - InsightX Scoring Engine

Applies to the test suite and to the docstring examples collected from
insightx/ with --doctest-modules.
"""

import pytest

from insightx.config import Settings
from insightx.logging_config import configure_logging


@pytest.fixture(autouse=True)
def quiet_scoring_events():
    """Route structlog through stdlib logging at WARNING so debug/info events stay off stdout."""
    configure_logging(Settings(LOG_LEVEL="WARNING", LOG_FORMAT="json"))
    yield
