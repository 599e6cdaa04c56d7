"""Menu routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_menu_service
from domain.schemas import (
    CreatedResponse,
    MenuCreate,
    MenuResponse,
    MenuUpdate,
    UpdatedResponse,
)
from services import MenuService

router = APIRouter(prefix="/menus", tags=["Menus"])
logger = logging.getLogger("restaurant.api.menus")


@router.get("", response_model=List[MenuResponse])
def list_menus(service: MenuService = Depends(get_menu_service)):
    """Return all menus"""
    records = service.list_all()
    logger.info("Found %d menus", len(records))
    return [MenuResponse.model_validate(m) for m in records]


@router.get("/{menu_id}", response_model=MenuResponse)
def get_menu(menu_id: str, service: MenuService = Depends(get_menu_service)):
    return MenuResponse.model_validate(service.get(menu_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_menu(payload: MenuCreate, service: MenuService = Depends(get_menu_service)):
    result = service.create(payload)
    return {"message": "Menu created", "data": result}


@router.patch("/{menu_id}", response_model=UpdatedResponse)
def update_menu(
    menu_id: str, payload: MenuUpdate, service: MenuService = Depends(get_menu_service)
):
    """
    Update a menu.

    When both start_date and end_date are sent, end_date must come after
    start_date and must not have passed yet.
    """
    result = service.update(menu_id, payload)
    return {"message": "Menu updated successfully", "result": result}
