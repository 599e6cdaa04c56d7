"""
API dependencies for dependency injection.

Collection handles live on ``app.state`` (opened once at startup, or injected
by tests) and are wrapped into repositories and services per request.
"""

from fastapi import Depends, Request

from adapters.mongo_adapter import Collections
from app.config import Settings
from repositories import (
    EmployeeRepository,
    FoodRepository,
    InvoiceRepository,
    MenuRepository,
    OrderItemRepository,
    OrderRepository,
    TableRepository,
)
from services import (
    EmployeeService,
    FoodService,
    InvoiceService,
    MenuService,
    OrderItemService,
    OrderService,
    TableService,
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_collections(request: Request) -> Collections:
    """
    Collection handles dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(collections: Collections = Depends(get_collections)):
            ...
    """
    collections = getattr(request.app.state, "collections", None)
    if collections is None:
        raise RuntimeError("MongoDB collections are not initialized")
    return collections


def get_request_timeout(settings: Settings = Depends(get_settings)) -> float:
    return settings.request_timeout_sec


def get_food_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> FoodService:
    return FoodService(
        FoodRepository(collections.food, timeout),
        MenuRepository(collections.menu, timeout),
    )


def get_menu_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> MenuService:
    return MenuService(MenuRepository(collections.menu, timeout))


def get_order_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> OrderService:
    return OrderService(
        OrderRepository(collections.order, timeout),
        TableRepository(collections.table, timeout),
    )


def get_order_item_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> OrderItemService:
    return OrderItemService(
        OrderItemRepository(collections.order_item, timeout),
        FoodRepository(collections.food, timeout),
        OrderRepository(collections.order, timeout),
        TableRepository(collections.table, timeout),
    )


def get_table_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> TableService:
    return TableService(TableRepository(collections.table, timeout))


def get_invoice_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> InvoiceService:
    return InvoiceService(
        InvoiceRepository(collections.invoice, timeout),
        OrderRepository(collections.order, timeout),
    )


def get_employee_service(
    collections: Collections = Depends(get_collections),
    timeout: float = Depends(get_request_timeout),
) -> EmployeeService:
    return EmployeeService(EmployeeRepository(collections.employee, timeout))
