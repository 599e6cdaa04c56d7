"""API routes package"""

from . import foods, menus, orders, order_items, tables, invoices, employees, health

__all__ = [
    "foods",
    "menus",
    "orders",
    "order_items",
    "tables",
    "invoices",
    "employees",
    "health",
]
