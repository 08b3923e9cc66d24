import os
from dataclasses import dataclass

from .config import Settings
from ..infrastructure.repositories.api_key_repository import FileApiKeyRepository
from ..services.api_key_service import ApiKeyService
from ..services.credential_registry import CredentialRegistry


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    repository: FileApiKeyRepository
    credential_registry: CredentialRegistry
    api_key_service: ApiKeyService


def build_container(settings: Settings) -> ApplicationContainer:
    repository = FileApiKeyRepository(settings.api_keys_file)
    repository.initialize()
    registry = CredentialRegistry(environ=os.environ if settings.export_to_process_env else None)
    return ApplicationContainer(
        settings=settings,
        repository=repository,
        credential_registry=registry,
        api_key_service=ApiKeyService(repository, registry),
    )
