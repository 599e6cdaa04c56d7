"""
Order Repository - Data access layer for orders
"""

from repositories.base import BaseRepository


class OrderRepository(BaseRepository):
    id_field = "order_id"
