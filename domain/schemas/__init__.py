"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common import (
    MessageResponse,
    CreatedResponse,
    InsertResult,
    UpdatedResponse,
    UpdateResult,
)
from domain.schemas.food_schemas import FoodCreate, FoodUpdate, FoodResponse, FoodPage
from domain.schemas.menu_schemas import MenuCreate, MenuUpdate, MenuResponse
from domain.schemas.order_schemas import OrderCreate, OrderUpdate, OrderResponse
from domain.schemas.order_item_schemas import (
    OrderItemCreate,
    OrderItemUpdate,
    OrderItemLine,
    OrderItemBatchCreate,
    OrderItemBatchResponse,
    OrderItemResponse,
)
from domain.schemas.table_schemas import TableCreate, TableUpdate, TableResponse
from domain.schemas.invoice_schemas import InvoiceCreate, InvoiceUpdate, InvoiceResponse
from domain.schemas.employee_schemas import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
)

__all__ = [
    # Shared responses
    "MessageResponse",
    "CreatedResponse",
    "InsertResult",
    "UpdatedResponse",
    "UpdateResult",
    # Food
    "FoodCreate",
    "FoodUpdate",
    "FoodResponse",
    "FoodPage",
    # Menu
    "MenuCreate",
    "MenuUpdate",
    "MenuResponse",
    # Order
    "OrderCreate",
    "OrderUpdate",
    "OrderResponse",
    # Order items
    "OrderItemCreate",
    "OrderItemUpdate",
    "OrderItemLine",
    "OrderItemBatchCreate",
    "OrderItemBatchResponse",
    "OrderItemResponse",
    # Table
    "TableCreate",
    "TableUpdate",
    "TableResponse",
    # Invoice
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    # Employee
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
]
