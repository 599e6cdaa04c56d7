from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from domain.enums import EmployeeRole
from domain.schemas.common import TimestampedResponse


class EmployeeCreate(BaseModel):
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, min_length=5, max_length=20)
    role: Optional[EmployeeRole] = None

    model_config = {"use_enum_values": True}


class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=2, max_length=100)
    last_name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=5, max_length=20)
    role: Optional[EmployeeRole] = None

    model_config = {"use_enum_values": True}


class EmployeeResponse(TimestampedResponse):
    employee_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[EmployeeRole] = None
