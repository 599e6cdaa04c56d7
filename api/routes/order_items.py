"""Order item routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_order_item_service
from domain.schemas import (
    CreatedResponse,
    OrderItemBatchCreate,
    OrderItemBatchResponse,
    OrderItemCreate,
    OrderItemResponse,
    OrderItemUpdate,
    UpdatedResponse,
)
from services import OrderItemService

router = APIRouter(prefix="/order-items", tags=["Order Items"])
logger = logging.getLogger("restaurant.api.order_items")


@router.get("", response_model=List[OrderItemResponse])
def list_order_items(service: OrderItemService = Depends(get_order_item_service)):
    records = service.list_all()
    logger.info("Found %d order items", len(records))
    return [OrderItemResponse.model_validate(i) for i in records]


@router.post(
    "/batch",
    response_model=OrderItemBatchResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_order_with_items(
    payload: OrderItemBatchCreate,
    service: OrderItemService = Depends(get_order_item_service),
):
    """
    Open an order for a table and add all of its lines.

    Example body:
    {"table_id": "...", "order_items": [{"food_id": "...", "quantity": 2, "unit_price": 4.5}]}
    """
    result = service.create_batch(payload)
    return {"message": "Order items created", **result}


@router.get("/{order_item_id}", response_model=OrderItemResponse)
def get_order_item(
    order_item_id: str, service: OrderItemService = Depends(get_order_item_service)
):
    return OrderItemResponse.model_validate(service.get(order_item_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_order_item(
    payload: OrderItemCreate,
    service: OrderItemService = Depends(get_order_item_service),
):
    """Add a line to an existing order; the food and the order must exist."""
    result = service.create(payload)
    return {"message": "Order item created", "data": result}


@router.patch("/{order_item_id}", response_model=UpdatedResponse)
def update_order_item(
    order_item_id: str,
    payload: OrderItemUpdate,
    service: OrderItemService = Depends(get_order_item_service),
):
    result = service.update(order_item_id, payload)
    return {"message": "Order item updated successfully", "result": result}
