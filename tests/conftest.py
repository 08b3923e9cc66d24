"""Shared fixtures for the API key store tests."""

from pathlib import Path
from typing import Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from app.core.app_factory import create_application
from app.core.config import Settings
from app.domain.models import ApiKeyRecord
from app.infrastructure.repositories.api_key_repository import FileApiKeyRepository
from app.services.api_key_service import ApiKeyService
from app.services.credential_registry import CredentialRegistry


@pytest.fixture
def key_file(tmp_path: Path) -> Path:
    return tmp_path / ".env.api-keys"


@pytest.fixture
def repository(key_file: Path) -> FileApiKeyRepository:
    repo = FileApiKeyRepository(key_file)
    repo.initialize()
    return repo


@pytest.fixture
def environ() -> Dict[str, str]:
    """Stand-in for the process environment."""
    return {}


@pytest.fixture
def registry(environ: Dict[str, str]) -> CredentialRegistry:
    return CredentialRegistry(environ=environ, fallback={})


@pytest.fixture
def service(repository: FileApiKeyRepository, registry: CredentialRegistry) -> ApiKeyService:
    return ApiKeyService(repository, registry)


@pytest.fixture
def make_record():
    def _make(
        id: str = "a1b2c3d4e5f6",
        name: str = "Primary",
        service: str = "openai",
        key: str = "abcdef1234567890",
        created_at: str = "2024-05-01T12:00:00.000Z",
    ) -> ApiKeyRecord:
        return ApiKeyRecord(id=id, name=name, service=service, key=key, created_at=created_at)

    return _make


@pytest.fixture
def settings(key_file: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("API_KEYS_FILE", str(key_file))
    monkeypatch.setenv("API_KEYS_EXPORT_ENV", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    return Settings()


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client
