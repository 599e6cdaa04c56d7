"""Dining tables"""

from repositories import TableRepository
from services.entity_service import EntityService


class TableService(EntityService):
    entity_label = "Table"

    def __init__(self, tables: TableRepository):
        super().__init__(tables, "restaurant.table")
