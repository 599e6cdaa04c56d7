from pydantic import BaseModel, Field
from typing import Optional

from domain.schemas.common import TimestampedResponse


class TableCreate(BaseModel):
    number_of_guests: int = Field(..., gt=0, description="Seating capacity")
    table_number: int = Field(..., gt=0)


class TableUpdate(BaseModel):
    number_of_guests: Optional[int] = Field(None, gt=0)
    table_number: Optional[int] = Field(None, gt=0)


class TableResponse(TimestampedResponse):
    table_id: str
    number_of_guests: Optional[int] = None
    table_number: Optional[int] = None
