import pytest

from mcastutils.config import UtilsConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Pin a default config so host environment and .env files never leak in."""
    config = UtilsConfig()
    set_config(config)
    yield config
    set_config(None)
