"""Errors raised by the API key store."""

from __future__ import annotations

from typing import Dict, List, Optional


class ApiKeyStoreError(Exception):
    """Base class for API key store failures."""


class ValidationError(ApiKeyStoreError, ValueError):
    """Input rejected before anything is persisted."""

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        self.errors = errors
        summary = "; ".join(f"{item['field']}: {item['message']}" for item in errors)
        super().__init__(summary or "Invalid API key payload")


class NotFoundError(ApiKeyStoreError, LookupError):
    """No stored record matches the requested identifier."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"API key not found: {identifier}")


class PersistenceError(ApiKeyStoreError):
    """Reading or writing the key file failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)
