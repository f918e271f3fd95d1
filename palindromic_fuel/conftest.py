"""Test fixtures for palindromic_fuel."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from palindromic_fuel.config import Settings, get_settings
from palindromic_fuel.web import create_app


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(max_volume_limit=1000)


@pytest.fixture
def test_client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
