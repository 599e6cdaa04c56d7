"""Staff routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_employee_service
from domain.schemas import (
    CreatedResponse,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    UpdatedResponse,
)
from services import EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])
logger = logging.getLogger("restaurant.api.employees")


@router.get("", response_model=List[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    records = service.list_all()
    logger.info("Found %d employees", len(records))
    return [EmployeeResponse.model_validate(e) for e in records]


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: str, service: EmployeeService = Depends(get_employee_service)
):
    return EmployeeResponse.model_validate(service.get(employee_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)
):
    result = service.create(payload)
    return {"message": "Employee created", "data": result}


@router.patch("/{employee_id}", response_model=UpdatedResponse)
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    result = service.update(employee_id, payload)
    return {"message": "Employee updated successfully", "result": result}
