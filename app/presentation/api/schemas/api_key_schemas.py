"""Pydantic schemas for API key endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models import ApiKeyRecord


class CreateApiKeyRequest(BaseModel):
    """Request schema for creating an API key; types and emptiness are checked by the service."""

    name: Any = None
    service: Any = None


class ApiKeyResponse(BaseModel):
    """API key as returned to clients. ``key`` is plaintext only on creation."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    service: str
    key: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: ApiKeyRecord) -> "ApiKeyResponse":
        return cls(
            id=record.id,
            name=record.name,
            service=record.service,
            key=record.key,
            created_at=record.created_at,
        )


class MessageResponse(BaseModel):
    message: str
