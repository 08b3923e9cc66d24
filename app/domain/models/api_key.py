"""API key record stored for a third-party service."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict

_KNOWN_VARIABLES: Dict[str, str] = {
    "perplexity": "PERPLEXITY_API_KEY",
    "pplx": "PERPLEXITY_API_KEY",
    "openai": "OPENAI_API_KEY",
    "mapbox": "MAPBOX_API_KEY",
    "mls": "MLS_API_KEY",
}


def env_var_name(service: str) -> str:
    """Map a service identifier to the variable consumers read it from."""
    normalized = service.lower()
    known = _KNOWN_VARIABLES.get(normalized)
    if known:
        return known
    return f"{normalized.upper()}_API_KEY"


@dataclass(slots=True)
class ApiKeyRecord:
    """
    Credential for an external service (OpenAI, Perplexity, Mapbox, MLS...).

    Attributes:
        id: Short random hex token, immutable
        name: Human readable label
        service: Lowercase service identifier, unique across the store
        key: Hex encoded secret
        created_at: ISO-8601 creation timestamp
    """

    id: str
    name: str
    service: str
    key: str
    created_at: str

    @property
    def env_var(self) -> str:
        return env_var_name(self.service)

    def masked_key(self) -> str:
        if len(self.key) <= 8:
            return "*" * len(self.key)
        return f"{self.key[:4]}...{self.key[-4:]}"

    def redacted(self) -> "ApiKeyRecord":
        """Copy of the record safe to hand out in listings."""
        return replace(self, key=self.masked_key())

    def matches_service(self, service: str) -> bool:
        return self.service.lower() == service.lower()

    def __repr__(self) -> str:
        return f"<ApiKeyRecord id={self.id} service={self.service} name={self.name}>"
