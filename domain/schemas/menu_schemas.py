from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from domain.schemas.common import TimestampedResponse, UTCDatetime


class MenuCreate(BaseModel):
    """Schema for creating a menu; the validity window is optional"""

    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    start_date: Optional[UTCDatetime] = None
    end_date: Optional[UTCDatetime] = None


class MenuUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    start_date: Optional[UTCDatetime] = None
    end_date: Optional[UTCDatetime] = None


class MenuResponse(TimestampedResponse):
    menu_id: str
    name: Optional[str] = None
    category: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
