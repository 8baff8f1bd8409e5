"""
Shared test config
"""
# Third Party
import pytest

# Local
from appsody_operator.test_helpers.helpers import configure_logging, setup_app

configure_logging()


@pytest.fixture
def app():
    """A minimal application with only the required fields set"""
    return setup_app()
