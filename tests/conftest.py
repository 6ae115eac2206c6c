"""Shared test fixtures and configuration for pytest."""
import json

import pytest

from uocflix_catalog_service.models import Film, Genre, Series, User
from uocflix_catalog_service.repos import UserTable


# ===== Catalog Fixtures =====

@pytest.fixture
def drama_series() -> Series:
    """Drama series."""
    return Series(name='The Crown', genre=Genre.DRAMA)


@pytest.fixture
def action_series() -> Series:
    """Action series."""
    return Series(name='Mission Impossible', genre=Genre.ACTION)


@pytest.fixture
def comedy_series() -> Series:
    """Comedy series."""
    return Series(name='Monty Python', genre=Genre.COMEDY)


@pytest.fixture
def drama_film(drama_series) -> Film:
    return Film(name='The Crown: Origins', duration=90, series=drama_series)


@pytest.fixture
def action_film(action_series) -> Film:
    return Film(name='Fallout', duration=120, series=action_series)


@pytest.fixture
def comedy_film(comedy_series) -> Film:
    return Film(name='Holy Grail', duration=45, series=comedy_series)


# ===== User Fixtures =====

@pytest.fixture
def sample_user() -> User:
    """Sample user for testing."""
    return User('jdoe', 'John Doe', 'jdoe@example.com')


@pytest.fixture
def other_user() -> User:
    """Second sample user with a different username."""
    return User('asmith', 'Anna Smith', 'asmith@example.com')


@pytest.fixture
def sample_users() -> list[User]:
    """List of sample users for testing."""
    return [
        User('jdoe', 'John Doe', 'jdoe@example.com'),
        User('asmith', 'Anna Smith', 'asmith@example.com'),
        User('pgarcia', 'Pau Garcia', 'pgarcia@example.com'),
    ]


@pytest.fixture
def user_table(sample_users) -> UserTable:
    """Table holding the sample users."""
    table = UserTable()
    for user in sample_users:
        table.add(user)
    yield table
    table.free()


# ===== Configuration Fixtures =====

@pytest.fixture
def clean_config(monkeypatch):
    """Remove catalog configuration from the environment."""
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('NAME_BLANK_CHARS', raising=False)


@pytest.fixture
def mock_local_settings(tmp_path, monkeypatch, clean_config):
    """Write a local.settings.json and point the config module at it."""
    settings = {
        "Values": {
            "LOG_LEVEL": "debug",
            "NAME_BLANK_CHARS": " _",
        }
    }

    settings_file = tmp_path / "local.settings.json"
    with open(settings_file, 'w') as f:
        json.dump(settings, f)

    import uocflix_catalog_service.config as config_module
    monkeypatch.setattr(
        config_module, "__file__", str(tmp_path / "uocflix_catalog_service" / "config.py")
    )

    yield settings_file
