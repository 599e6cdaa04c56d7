from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from domain.enums import PaymentMethod, PaymentStatus
from domain.schemas.common import TimestampedResponse, UTCDatetime


class InvoiceCreate(BaseModel):
    """Schema for billing an order"""

    order_id: str = Field(..., min_length=1)
    payment_method: Optional[PaymentMethod] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_due_date: Optional[UTCDatetime] = Field(
        None, description="Defaults to one day after creation"
    )

    model_config = {"use_enum_values": True}


class InvoiceUpdate(BaseModel):
    order_id: Optional[str] = Field(None, min_length=1)
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None
    payment_due_date: Optional[UTCDatetime] = None

    model_config = {"use_enum_values": True}


class InvoiceResponse(TimestampedResponse):
    invoice_id: str
    order_id: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None
    payment_due_date: Optional[datetime] = None
