"""
Pagination helpers for listings served by a single aggregation round trip.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.utils.helpers import parse_optional_int, parse_positive_int

DEFAULT_RECORDS_PER_PAGE = 10

# $slice takes 32-bit position and count arguments
MAX_SLICE_VALUE = 2**31 - 1


@dataclass(frozen=True)
class PageWindow:
    start_index: int
    records_per_page: int


def resolve_page_window(
    records_per_page: Optional[str] = None,
    page: Optional[str] = None,
    start_index: Optional[str] = None,
    default_records_per_page: int = DEFAULT_RECORDS_PER_PAGE,
) -> PageWindow:
    """
    Turn raw query values into an offset and a page size.

    ``recordsPerPage`` and ``page`` fall back to their defaults when missing,
    unparsable, below 1 or beyond the 32-bit range. A parsable ``startIndex``
    replaces the offset derived from the page; negative values are clamped
    to 0. Offsets past the 32-bit range are capped, which still lands past
    the end of any collection and yields an empty page.
    """
    per_page = parse_positive_int(
        records_per_page, default_records_per_page, maximum=MAX_SLICE_VALUE
    )
    page_number = parse_positive_int(page, 1, maximum=MAX_SLICE_VALUE)
    offset = (page_number - 1) * per_page

    explicit = parse_optional_int(start_index)
    if explicit is not None:
        offset = max(explicit, 0)
    offset = min(offset, MAX_SLICE_VALUE)

    return PageWindow(start_index=offset, records_per_page=per_page)


def build_food_page_pipeline(start_index: int, records_per_page: int) -> List[Dict[str, Any]]:
    """
    Three stages: match everything, fold it into one group carrying the total
    count and all documents, then keep only the requested slice.
    """
    match_stage = {"$match": {}}
    group_stage = {
        "$group": {
            "_id": None,
            "total_count": {"$sum": 1},
            "data": {"$push": "$$ROOT"},
        }
    }
    project_stage = {
        "$project": {
            "_id": 0,
            "total_count": 1,
            "food_items": {"$slice": ["$data", start_index, records_per_page]},
        }
    }
    return [match_stage, group_stage, project_stage]
