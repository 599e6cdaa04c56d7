"""
Shared schema pieces: timestamp handling and the generic write responses.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, Field


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDatetime = Annotated[datetime, AfterValidator(ensure_utc)]

# Prices must be finite, non-negative and at most MAX_MONEY
MAX_MONEY = 1_000_000_000

Money = Annotated[float, Field(ge=0, le=MAX_MONEY, allow_inf_nan=False)]


class MessageResponse(BaseModel):
    """Plain message, used for empty listings"""

    message: str


class InsertResult(BaseModel):
    inserted_id: str = Field(..., description="Storage id of the new document")
    entity_id: str = Field(..., description="Business id of the new document")


class CreatedResponse(BaseModel):
    message: str
    data: InsertResult


class UpdateResult(BaseModel):
    """Raw counts reported by the storage engine for an upserting update"""

    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None


class UpdatedResponse(BaseModel):
    message: str
    result: UpdateResult


class TimestampedResponse(BaseModel):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


def clean_update(payload: BaseModel) -> dict[str, Any]:
    """Fields the client actually sent, with explicit nulls treated as absent."""
    return payload.model_dump(exclude_unset=True, exclude_none=True)
