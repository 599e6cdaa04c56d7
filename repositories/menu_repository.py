"""
Menu Repository - Data access layer for menus
"""

from repositories.base import BaseRepository


class MenuRepository(BaseRepository):
    id_field = "menu_id"
