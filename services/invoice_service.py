"""Invoices, each billing an existing order"""

from datetime import datetime, timedelta
from typing import Any, Dict

from domain.enums import PaymentStatus
from repositories import InvoiceRepository, OrderRepository
from services.entity_service import EntityService

PAYMENT_TERM = timedelta(days=1)


class InvoiceService(EntityService):
    entity_label = "Invoice"

    def __init__(self, invoices: InvoiceRepository, orders: OrderRepository):
        super().__init__(invoices, "restaurant.invoice")
        self.references = {"order_id": (orders, "Order")}

    def prepare_create(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        fields.setdefault("payment_status", PaymentStatus.PENDING.value)
        fields.setdefault("payment_due_date", now + PAYMENT_TERM)
        return fields
