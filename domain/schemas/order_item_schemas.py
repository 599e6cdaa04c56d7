from pydantic import BaseModel, Field
from typing import Optional, List

from domain.schemas.common import Money, TimestampedResponse


class OrderItemCreate(BaseModel):
    """Schema for adding a single line to an existing order"""

    quantity: int = Field(..., gt=0)
    unit_price: Money = Field(..., description="Rounded to 2 decimal places on write")
    food_id: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)


class OrderItemUpdate(BaseModel):
    quantity: Optional[int] = Field(None, gt=0)
    unit_price: Optional[Money] = None
    food_id: Optional[str] = Field(None, min_length=1)
    order_id: Optional[str] = Field(None, min_length=1)


class OrderItemLine(BaseModel):
    """A line of a batch order; the order id is assigned by the server"""

    quantity: int = Field(..., gt=0)
    unit_price: Money
    food_id: str = Field(..., min_length=1)


class OrderItemBatchCreate(BaseModel):
    """Open an order for a table and add all of its lines in one request"""

    table_id: str = Field(..., min_length=1)
    order_items: List[OrderItemLine] = Field(..., min_length=1)


class OrderItemBatchResponse(BaseModel):
    message: str
    order_id: str
    order_item_ids: List[str]


class OrderItemResponse(TimestampedResponse):
    order_item_id: str
    quantity: Optional[int] = None
    unit_price: Optional[float] = None
    food_id: Optional[str] = None
    order_id: Optional[str] = None
