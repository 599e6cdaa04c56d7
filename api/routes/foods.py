"""
Food routes - paginated listing and menu-checked writes.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional, Union
import logging

from api.dependencies import get_food_service, get_settings
from app.config import Settings
from domain.schemas import (
    CreatedResponse,
    FoodCreate,
    FoodPage,
    FoodResponse,
    FoodUpdate,
    MessageResponse,
    UpdatedResponse,
)
from repositories import resolve_page_window
from services import FoodService

router = APIRouter(prefix="/foods", tags=["Foods"])
logger = logging.getLogger("restaurant.api.foods")


@router.get("", response_model=Union[FoodPage, MessageResponse])
def list_foods(
    records_per_page: Optional[str] = Query(
        default=None, alias="recordsPerPage", description="Page size (default 10)"
    ),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    start_index: Optional[str] = Query(
        default=None, alias="startIndex", description="Explicit offset, overrides page"
    ),
    service: FoodService = Depends(get_food_service),
    settings: Settings = Depends(get_settings),
):
    """
    List food items one page at a time.

    - **recordsPerPage**: items per page; invalid or < 1 falls back to the default
    - **page**: invalid or < 1 falls back to 1
    - **startIndex**: offset used instead of (page - 1) * recordsPerPage

    An empty collection answers with a message instead of a page.
    """
    window = resolve_page_window(
        records_per_page,
        page,
        start_index,
        default_records_per_page=settings.default_records_per_page,
    )
    result = service.list_page(window)
    if result is None:
        logger.info("No food items to list")
        return MessageResponse(message="No food items found")
    logger.info(
        "Listing %d of %d food items from offset %d",
        len(result["food_items"]),
        result["total_count"],
        window.start_index,
    )
    return FoodPage.model_validate(result)


@router.get("/{food_id}", response_model=FoodResponse)
def get_food(food_id: str, service: FoodService = Depends(get_food_service)):
    """Get a food item by its food_id."""
    return FoodResponse.model_validate(service.get(food_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_food(payload: FoodCreate, service: FoodService = Depends(get_food_service)):
    """Create a food item; the menu must exist and the price is rounded to 2 places."""
    result = service.create(payload)
    return {"message": "Food item created", "data": result}


@router.patch("/{food_id}", response_model=UpdatedResponse)
def update_food(
    food_id: str, payload: FoodUpdate, service: FoodService = Depends(get_food_service)
):
    """Update the supplied fields only; an unknown food_id creates the item."""
    result = service.update(food_id, payload)
    return {"message": "Food item updated successfully", "result": result}
