from __future__ import annotations

from typing import List, Mapping, Optional, Protocol

from ..models import ApiKeyRecord


class ApiKeyRecordRepository(Protocol):
    """Storage holding the full set of API key records."""

    def initialize(self) -> None:
        ...

    def load_all(self) -> List[ApiKeyRecord]:
        ...

    def save_all(self, records: List[ApiKeyRecord]) -> None:
        ...


class CredentialSink(Protocol):
    """Receives the derived variable table after every mutation."""

    def publish(self, records: List[ApiKeyRecord]) -> Mapping[str, str]:
        ...

    def resolve(self, service: str) -> Optional[str]:
        ...
