"""Order routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_order_item_service, get_order_service
from domain.schemas import (
    CreatedResponse,
    OrderCreate,
    OrderItemResponse,
    OrderResponse,
    OrderUpdate,
    UpdatedResponse,
)
from services import OrderItemService, OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("restaurant.api.orders")


@router.get("", response_model=List[OrderResponse])
def list_orders(service: OrderService = Depends(get_order_service)):
    records = service.list_all()
    logger.info("Found %d orders", len(records))
    return [OrderResponse.model_validate(o) for o in records]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    return OrderResponse.model_validate(service.get(order_id))


@router.get("/{order_id}/items", response_model=List[OrderItemResponse])
def list_order_items(
    order_id: str, service: OrderItemService = Depends(get_order_item_service)
):
    """All lines of one order"""
    records = service.list_for_order(order_id)
    logger.info("Found %d items for order %s", len(records), order_id)
    return [OrderItemResponse.model_validate(i) for i in records]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, service: OrderService = Depends(get_order_service)):
    """Open an order at an existing table."""
    result = service.create(payload)
    return {"message": "Order created", "data": result}


@router.patch("/{order_id}", response_model=UpdatedResponse)
def update_order(
    order_id: str, payload: OrderUpdate, service: OrderService = Depends(get_order_service)
):
    result = service.update(order_id, payload)
    return {"message": "Order updated successfully", "result": result}
