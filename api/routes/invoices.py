"""Invoice routes"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from api.dependencies import get_invoice_service
from domain.schemas import (
    CreatedResponse,
    InvoiceCreate,
    InvoiceResponse,
    InvoiceUpdate,
    UpdatedResponse,
)
from services import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])
logger = logging.getLogger("restaurant.api.invoices")


@router.get("", response_model=List[InvoiceResponse])
def list_invoices(service: InvoiceService = Depends(get_invoice_service)):
    records = service.list_all()
    logger.info("Found %d invoices", len(records))
    return [InvoiceResponse.model_validate(i) for i in records]


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: str, service: InvoiceService = Depends(get_invoice_service)):
    return InvoiceResponse.model_validate(service.get(invoice_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate, service: InvoiceService = Depends(get_invoice_service)
):
    """Bill an existing order. Status defaults to PENDING, due date to one day out."""
    result = service.create(payload)
    return {"message": "Invoice created", "data": result}


@router.patch("/{invoice_id}", response_model=UpdatedResponse)
def update_invoice(
    invoice_id: str,
    payload: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    result = service.update(invoice_id, payload)
    return {"message": "Invoice updated successfully", "result": result}
