"""Service for third-party API key management."""

import logging
import secrets
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.domain.errors import NotFoundError, ValidationError
from app.domain.models import ApiKeyRecord
from app.domain.ports.persistence import ApiKeyRecordRepository, CredentialSink

logger = logging.getLogger(__name__)

_LINE_BREAKING_CHARACTERS = ("|", "\n", "\r")
# Services become variable names, which the OS environment rejects with these in them.
_UNEXPORTABLE_CHARACTERS = ("=", "\x00")


class ApiKeyService:
    """Creates, lists and deletes API keys and keeps the credential table in sync."""

    def __init__(self, repository: ApiKeyRecordRepository, registry: CredentialSink):
        self.repository = repository
        self.registry = registry
        self.loaded_count = 0

    def create(self, name: Any, service: Any) -> ApiKeyRecord:
        """
        Create a key for ``service``, replacing any key the service already has.

        Args:
            name: Human label for the key
            service: Service identifier, compared case-insensitively

        Returns:
            The stored record, including the plaintext key. This is the only
            place the full secret is handed out.

        Raises:
            ValidationError: If ``name`` or ``service`` is missing, empty, or
                contains characters the key file or environment cannot hold.
        """
        self._validate(name=name, service=service)

        record = ApiKeyRecord(
            id=secrets.token_hex(6),
            name=name,
            service=service.lower(),
            key=secrets.token_hex(32),
            created_at=_utc_timestamp(),
        )

        records = self.repository.load_all()
        existing_index = next(
            (index for index, item in enumerate(records) if item.matches_service(record.service)),
            None,
        )
        if existing_index is not None:
            logger.info("Replacing API key %s for service %s", records[existing_index].id, record.service)
            records[existing_index] = record
        else:
            records.append(record)

        self.repository.save_all(records)
        self.materialize_environment()
        return record

    def list(self) -> List[ApiKeyRecord]:
        """All stored keys with the secret reduced to ``first4...last4``."""
        return [record.redacted() for record in self.repository.load_all()]

    def delete(self, identifier: str) -> ApiKeyRecord:
        """
        Remove one key by id, service name or legacy ``<service>1`` alias.

        Raises:
            NotFoundError: If nothing matches; the store is left untouched.
        """
        records = self.repository.load_all()
        index = _find_match(records, identifier)
        if index is None:
            raise NotFoundError(identifier)

        removed = records.pop(index)
        self.repository.save_all(records)
        self.materialize_environment()
        logger.info("Deleted API key %s for service %s", removed.id, removed.service)
        return removed

    def materialize_environment(self) -> int:
        """Publish every stored key to the credential registry."""
        records = self.repository.load_all()
        self.registry.publish(records)
        self.loaded_count = len(records)
        logger.info("Loaded %d API keys into environment variables", len(records))
        return len(records)

    def resolve_key(self, service: str) -> Optional[str]:
        return self.registry.resolve(service)

    @staticmethod
    def _validate(name: Any, service: Any) -> None:
        errors: List[Dict[str, str]] = []
        checks = (
            ("name", name, _LINE_BREAKING_CHARACTERS),
            ("service", service, _LINE_BREAKING_CHARACTERS + _UNEXPORTABLE_CHARACTERS),
        )
        for field, value, forbidden in checks:
            label = field.capitalize()
            if not isinstance(value, str) or not value:
                errors.append({"field": field, "message": f"{label} is required"})
            elif any(char in value for char in forbidden):
                shown = ", ".join(repr(char) for char in forbidden)
                errors.append({"field": field, "message": f"{label} must not contain any of {shown}"})
        if errors:
            raise ValidationError(errors)


def _find_match(records: List[ApiKeyRecord], identifier: str) -> Optional[int]:
    lowered = identifier.lower()
    matchers = (
        lambda record: record.id == identifier,
        lambda record: record.service.lower() == lowered,
        lambda record: f"{record.service}1".lower() == lowered,
    )
    for matcher in matchers:
        for index, record in enumerate(records):
            if matcher(record):
                return index
    return None


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
