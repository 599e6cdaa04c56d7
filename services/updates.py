"""
Write-document builders shared by every entity service.

Creates get a fresh identity and matching timestamps; updates get a sparse
``$set`` document holding only what the client sent plus ``updated_at``.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional

from pymongo.results import UpdateResult

from core.utils.helpers import new_identity, to_fixed


def round_money(fields: Mapping[str, Any], money_fields: Iterable[str]) -> Dict[str, Any]:
    """Copy of ``fields`` with currency values rounded to 2 decimal places"""
    rounded = dict(fields)
    for name in money_fields:
        if rounded.get(name) is not None:
            rounded[name] = to_fixed(rounded[name], 2)
    return rounded


def build_new_document(
    fields: Mapping[str, Any],
    id_field: str,
    now: datetime,
    money_fields: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Stamp a validated payload for insertion.

    The business id is the hex form of the generated storage id, and
    ``created_at`` equals ``updated_at``.
    """
    document = round_money(fields, money_fields)
    oid, entity_id = new_identity()
    document["_id"] = oid
    document[id_field] = entity_id
    document["created_at"] = now
    document["updated_at"] = now
    return document


def build_set_document(
    fields: Mapping[str, Any],
    now: datetime,
    money_fields: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Build the ``$set`` body of a partial update.

    Only keys present with a non-null value are kept; ``updated_at`` is always
    set. Identity and creation fields cannot be overwritten through here.
    """
    present = {
        key: value
        for key, value in fields.items()
        if value is not None and key not in ("_id", "created_at", "updated_at")
    }
    set_document = round_money(present, money_fields)
    set_document["updated_at"] = now
    return set_document


def update_result_to_dict(result: UpdateResult) -> Dict[str, Optional[Any]]:
    """Flatten the driver's update result for the response body"""
    upserted_id = result.upserted_id
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
        "upserted_id": str(upserted_id) if upserted_id is not None else None,
    }
