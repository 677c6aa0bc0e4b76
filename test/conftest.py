import os
from datetime import datetime, timezone

import pytest

from cartomath import settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Run each test with defaults that ignore the caller's environment"""
    saved = {k: os.environ.pop(k) for k in list(os.environ) if k.startswith('CARTOMATH_')}
    settings.reset_settings()
    yield
    os.environ.update(saved)
    settings.reset_settings()


@pytest.fixture(scope="session")
def tutorial_date():
    """ Reference date of the Schlyter worked example """
    return datetime(1990, 4, 19, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def june_solstice():
    """ June solstice 2024 """
    return datetime(2024, 6, 20, 20, 51, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def march_equinox():
    """ March equinox 2024 """
    return datetime(2024, 3, 20, 3, 6, tzinfo=timezone.utc)
