"""
Order Item Repository - Data access layer for order lines
"""

from typing import List

import pymongo

from repositories.base import BaseRepository, Document


class OrderItemRepository(BaseRepository):
    id_field = "order_item_id"

    def get_by_order(self, order_id: str) -> List[Document]:
        """All lines of one order, oldest first"""
        with pymongo.timeout(self.timeout):
            return list(
                self.collection.find(
                    {"order_id": order_id}, sort=[("created_at", pymongo.ASCENDING)]
                )
            )

    def create_many(self, documents: List[Document]) -> List[str]:
        """Insert several lines at once and return their storage ids"""
        with pymongo.timeout(self.timeout):
            result = self.collection.insert_many(documents)
        return [str(oid) for oid in result.inserted_ids]
