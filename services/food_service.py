"""Food items: paginated listing and menu-checked writes"""

from typing import Optional

from repositories import FoodRepository, MenuRepository, PageWindow
from repositories.base import Document
from services.entity_service import EntityService


class FoodService(EntityService):
    entity_label = "Food item"
    money_fields = ("price",)

    def __init__(self, foods: FoodRepository, menus: MenuRepository):
        super().__init__(foods, "restaurant.food")
        self.references = {"menu_id": (menus, "Menu")}

    def list_page(self, window: PageWindow) -> Optional[Document]:
        """
        One page of foods with the total count, or None for an empty collection.

        A window starting past the end still reports ``total_count`` with an
        empty ``food_items`` list.
        """
        return self.repository.get_page(window.start_index, window.records_per_page)
