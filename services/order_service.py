"""Orders, each bound to an existing table"""

from datetime import datetime
from typing import Any, Dict

from repositories import OrderRepository, TableRepository
from services.entity_service import EntityService


class OrderService(EntityService):
    entity_label = "Order"

    def __init__(self, orders: OrderRepository, tables: TableRepository):
        super().__init__(orders, "restaurant.order")
        self.references = {"table_id": (tables, "Table")}

    def prepare_create(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        fields.setdefault("order_date", now)
        return fields
