"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from app.core.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("API_KEYS_FILE", "API_KEYS_EXPORT_ENV", "LOG_LEVEL", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.api_keys_file == (tmp_path / ".env.api-keys").resolve()
    assert settings.export_to_process_env is False
    assert settings.log_level == "INFO"
    assert settings.cors_allow_origins == ["*"]


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("API_KEYS_FILE", str(tmp_path / "keys.txt"))
    monkeypatch.setenv("API_KEYS_EXPORT_ENV", "Yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:5173, https://app.example.com,")

    settings = Settings()

    assert settings.api_keys_file == Path(tmp_path / "keys.txt").resolve()
    assert settings.export_to_process_env is True
    assert settings.log_level == "DEBUG"
    assert settings.cors_allow_origins == ["http://localhost:5173", "https://app.example.com"]


def test_invalid_boolean_is_rejected(monkeypatch):
    monkeypatch.setenv("API_KEYS_EXPORT_ENV", "maybe")

    with pytest.raises(RuntimeError, match="API_KEYS_EXPORT_ENV"):
        Settings()
