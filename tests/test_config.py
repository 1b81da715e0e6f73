"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from blogapp.core.config import Settings


def test_production_requires_secret_key():
    with pytest.raises(ValidationError):
        Settings(ENVIRONMENT="production", DATABASE_URL="sqlite://", SECRET_KEY="")


def test_production_accepts_configured_secret_key():
    settings = Settings(ENVIRONMENT="production", DATABASE_URL="sqlite://", SECRET_KEY="s3cret")
    assert settings.SECRET_KEY.get_secret_value() == "s3cret"


def test_development_without_secret_gets_random_key():
    first = Settings(ENVIRONMENT="development", DATABASE_URL="sqlite://", SECRET_KEY="")
    second = Settings(ENVIRONMENT="development", DATABASE_URL="sqlite://", SECRET_KEY="")
    assert first.SECRET_KEY.get_secret_value()
    assert first.SECRET_KEY.get_secret_value() != second.SECRET_KEY.get_secret_value()


def test_settings_are_frozen():
    settings = Settings(DATABASE_URL="sqlite://", SECRET_KEY="s3cret")
    with pytest.raises(ValidationError):
        settings.SECRET_KEY = "other"
