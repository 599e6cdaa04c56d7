"""Menus and their optional validity window"""

from datetime import datetime
from typing import Any, Mapping, Optional

from app.exceptions import ServiceValidationError
from core.utils.helpers import utc_now
from repositories import MenuRepository
from services.entity_service import EntityService


def check_validity_window(
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    now: Optional[datetime] = None,
) -> None:
    """
    Reject a window that ends before it starts or has already ended.

    A window that is already running is fine. Nothing is checked unless both
    ends are given.
    """
    if start_date is None or end_date is None:
        return
    if end_date <= start_date:
        raise ServiceValidationError(
            "end_date must be after start_date",
            details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
    if end_date <= (now or utc_now()):
        raise ServiceValidationError(
            "end_date must be in the future",
            details={"end_date": end_date.isoformat()},
        )


class MenuService(EntityService):
    entity_label = "Menu"

    def __init__(self, menus: MenuRepository):
        super().__init__(menus, "restaurant.menu")

    def validate_fields(self, fields: Mapping[str, Any], creating: bool) -> None:
        check_validity_window(fields.get("start_date"), fields.get("end_date"))
