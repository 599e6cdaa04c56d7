from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from domain.schemas.common import TimestampedResponse, UTCDatetime


class OrderCreate(BaseModel):
    table_id: str = Field(..., min_length=1, description="Table the order is served at")
    order_date: Optional[UTCDatetime] = Field(
        None, description="Defaults to the creation time"
    )


class OrderUpdate(BaseModel):
    table_id: Optional[str] = Field(None, min_length=1)
    order_date: Optional[UTCDatetime] = None


class OrderResponse(TimestampedResponse):
    order_id: str
    table_id: Optional[str] = None
    order_date: Optional[datetime] = None
