"""Services package - Business logic layer"""

from services.entity_service import EntityService
from services.food_service import FoodService
from services.menu_service import MenuService
from services.order_service import OrderService
from services.order_item_service import OrderItemService
from services.table_service import TableService
from services.invoice_service import InvoiceService
from services.employee_service import EmployeeService

__all__ = [
    "EntityService",
    "FoodService",
    "MenuService",
    "OrderService",
    "OrderItemService",
    "TableService",
    "InvoiceService",
    "EmployeeService",
]
