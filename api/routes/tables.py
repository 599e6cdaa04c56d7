"""Table routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_table_service
from domain.schemas import (
    CreatedResponse,
    TableCreate,
    TableResponse,
    TableUpdate,
    UpdatedResponse,
)
from services import TableService

router = APIRouter(prefix="/tables", tags=["Tables"])
logger = logging.getLogger("restaurant.api.tables")


@router.get("", response_model=List[TableResponse])
def list_tables(service: TableService = Depends(get_table_service)):
    records = service.list_all()
    logger.info("Found %d tables", len(records))
    return [TableResponse.model_validate(t) for t in records]


@router.get("/{table_id}", response_model=TableResponse)
def get_table(table_id: str, service: TableService = Depends(get_table_service)):
    return TableResponse.model_validate(service.get(table_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_table(payload: TableCreate, service: TableService = Depends(get_table_service)):
    result = service.create(payload)
    return {"message": "Table created", "data": result}


@router.patch("/{table_id}", response_model=UpdatedResponse)
def update_table(
    table_id: str, payload: TableUpdate, service: TableService = Depends(get_table_service)
):
    result = service.update(table_id, payload)
    return {"message": "Table updated successfully", "result": result}
