"""API router for third-party API key management."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.dependencies import get_api_key_service
from app.domain.errors import NotFoundError, ValidationError
from app.presentation.api.schemas.api_key_schemas import (
    ApiKeyResponse,
    CreateApiKeyRequest,
    MessageResponse,
)
from app.services.api_key_service import ApiKeyService

router = APIRouter(prefix="/api/api-keys", tags=["api-keys"])


@router.post("", response_model=ApiKeyResponse, status_code=status.HTTP_201_CREATED)
async def add_api_key(
    request: Optional[CreateApiKeyRequest] = Body(None),
    api_key_service: ApiKeyService = Depends(get_api_key_service),
) -> ApiKeyResponse:
    """Create a key for a service; the plaintext key is only returned here."""
    try:
        payload = request or CreateApiKeyRequest()
        record = api_key_service.create(name=payload.name, service=payload.service)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors) from exc
    return ApiKeyResponse.from_record(record)


@router.get("", response_model=List[ApiKeyResponse])
async def list_api_keys(
    api_key_service: ApiKeyService = Depends(get_api_key_service),
) -> List[ApiKeyResponse]:
    """List stored keys with redacted secrets."""
    return [ApiKeyResponse.from_record(record) for record in api_key_service.list()]


@router.delete("/{key_id}", response_model=MessageResponse)
async def delete_api_key(
    key_id: str,
    api_key_service: ApiKeyService = Depends(get_api_key_service),
) -> MessageResponse:
    try:
        api_key_service.delete(key_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="API key not found",
        ) from exc
    return MessageResponse(message="API key deleted successfully")
