import pytest

from rpn_calc.config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog output off stdout during tests."""
    configure_logging("WARNING")
    yield
