"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.pagination import PageWindow, resolve_page_window, build_food_page_pipeline
from repositories.food_repository import FoodRepository
from repositories.menu_repository import MenuRepository
from repositories.order_repository import OrderRepository
from repositories.order_item_repository import OrderItemRepository
from repositories.table_repository import TableRepository
from repositories.invoice_repository import InvoiceRepository
from repositories.employee_repository import EmployeeRepository

__all__ = [
    "BaseRepository",
    "PageWindow",
    "resolve_page_window",
    "build_food_page_pipeline",
    "FoodRepository",
    "MenuRepository",
    "OrderRepository",
    "OrderItemRepository",
    "TableRepository",
    "InvoiceRepository",
    "EmployeeRepository",
]
