"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from storefront.config import Settings


def test_production_requires_secret_key() -> None:
    with pytest.raises(ValidationError, match="SECRET_KEY is required"):
        Settings(_env_file=None, ENVIRONMENT="production", SECRET_KEY="")


def test_refresh_key_defaults_to_secret_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REFRESH_TOKEN_SECRET_KEY", raising=False)

    settings = Settings(_env_file=None, SECRET_KEY="signing-key")

    assert settings.REFRESH_TOKEN_SECRET_KEY == "signing-key"


def test_pepper_is_stripped() -> None:
    settings = Settings(_env_file=None, PASSWORD_PEPPER="  pepper \n")

    assert settings.PASSWORD_PEPPER == "pepper"
