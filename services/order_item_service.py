"""Order lines, including opening an order together with its lines"""

from typing import Any, Dict, List

from app.exceptions import NotFoundError
from core.utils.helpers import utc_now
from domain.schemas.order_item_schemas import OrderItemBatchCreate
from repositories import (
    FoodRepository,
    OrderItemRepository,
    OrderRepository,
    TableRepository,
)
from repositories.base import Document
from services.entity_service import EntityService
from services.updates import build_new_document


class OrderItemService(EntityService):
    entity_label = "Order item"
    money_fields = ("unit_price",)

    def __init__(
        self,
        order_items: OrderItemRepository,
        foods: FoodRepository,
        orders: OrderRepository,
        tables: TableRepository,
    ):
        super().__init__(order_items, "restaurant.order_item")
        self.orders = orders
        self.tables = tables
        self.references = {
            "food_id": (foods, "Food item"),
            "order_id": (orders, "Order"),
        }

    def list_for_order(self, order_id: str) -> List[Document]:
        """Lines of one order; the order itself must exist"""
        if not self.orders.exists(order_id):
            raise NotFoundError(f"Order {order_id} not found")
        return self.repository.get_by_order(order_id)

    def create_batch(self, payload: OrderItemBatchCreate) -> Dict[str, Any]:
        """
        Open an order for a table and insert all of its lines.

        The table and every food are checked before anything is written. The
        order insert and the line inserts are separate writes.

        Raises:
            NotFoundError: if the table or any food item does not exist
        """
        if not self.tables.exists(payload.table_id):
            raise NotFoundError(f"Table {payload.table_id} not found")

        lines = [line.model_dump() for line in payload.order_items]
        for line in lines:
            self.check_references({"food_id": line["food_id"]})

        now = utc_now()
        order = build_new_document(
            {"table_id": payload.table_id, "order_date": now}, self.orders.id_field, now
        )
        self.orders.create(order)
        order_id = order[self.orders.id_field]

        documents = [
            build_new_document(
                {**line, "order_id": order_id}, self.id_field, now, self.money_fields
            )
            for line in lines
        ]
        self.repository.create_many(documents)
        self.log_info(
            "Order opened with items", order_id=order_id, items=len(documents)
        )
        return {
            "order_id": order_id,
            "order_item_ids": [doc[self.id_field] for doc in documents],
        }
