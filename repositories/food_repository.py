"""
Food Repository - Data access layer for food items
"""

from typing import Optional

from repositories.base import BaseRepository, Document
from repositories.pagination import build_food_page_pipeline


class FoodRepository(BaseRepository):
    id_field = "food_id"

    def get_page(self, start_index: int, records_per_page: int) -> Optional[Document]:
        """Return ``{"total_count", "food_items"}`` or None when the collection is empty.

        The whole page comes back from a single aggregation round trip.
        """
        results = self.aggregate(
            build_food_page_pipeline(start_index, records_per_page)
        )
        if not results:
            return None
        return results[0]
