"""
Table Repository - Data access layer for dining tables
"""

from repositories.base import BaseRepository


class TableRepository(BaseRepository):
    id_field = "table_id"
