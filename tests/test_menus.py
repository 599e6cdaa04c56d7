"""
Tests for /menus and the validity-window rule.
"""

from datetime import timedelta

import pytest

from app.exceptions import ServiceValidationError
from core.utils.helpers import utc_now
from services.menu_service import check_validity_window
from test_fixtures import FIXED_NOW, inserted_document_of, make_menu_doc, set_document_of


def _iso(dt):
    return dt.isoformat()


# =============================================================================
# VALIDITY WINDOW
# =============================================================================


def test_window_needs_both_ends():
    check_validity_window(None, FIXED_NOW)
    check_validity_window(FIXED_NOW, None)


def test_window_end_must_follow_start():
    with pytest.raises(ServiceValidationError, match="after start_date"):
        check_validity_window(FIXED_NOW, FIXED_NOW - timedelta(hours=1), now=FIXED_NOW)


def test_window_already_running_is_accepted():
    check_validity_window(
        FIXED_NOW - timedelta(days=2), FIXED_NOW + timedelta(days=2), now=FIXED_NOW
    )


def test_window_already_over_is_rejected():
    with pytest.raises(ServiceValidationError, match="in the future"):
        check_validity_window(
            FIXED_NOW - timedelta(days=5), FIXED_NOW - timedelta(days=1), now=FIXED_NOW
        )


# =============================================================================
# ENDPOINTS
# =============================================================================


def test_list_menus(client, collections):
    collections.menu.find.return_value = [make_menu_doc(), make_menu_doc(name="Brunch")]
    r = client.get("/menus")
    assert r.status_code == 200
    assert [m["name"] for m in r.json()] == ["Dinner", "Brunch"]


def test_list_menus_empty(client):
    assert client.get("/menus").json() == []


def test_get_menu_not_found(client):
    r = client.get("/menus/nope")
    assert r.status_code == 404


def test_create_menu(client, collections):
    now = utc_now()
    payload = {
        "name": "Summer Specials",
        "category": "Seasonal",
        "start_date": _iso(now - timedelta(days=1)),
        "end_date": _iso(now + timedelta(days=30)),
    }
    r = client.post("/menus", json=payload)
    assert r.status_code == 201
    stored = inserted_document_of(collections.menu)
    assert stored["menu_id"] == r.json()["data"]["entity_id"]
    assert stored["start_date"].tzinfo is not None


def test_create_menu_without_window_omits_dates(client, collections):
    client.post("/menus", json={"name": "Drinks", "category": "Bar"})
    stored = inserted_document_of(collections.menu)
    assert "start_date" not in stored
    assert "end_date" not in stored


def test_create_menu_rejects_inverted_window(client, collections):
    now = utc_now()
    payload = {
        "name": "Broken",
        "category": "Mains",
        "start_date": _iso(now + timedelta(days=3)),
        "end_date": _iso(now + timedelta(days=1)),
    }
    r = client.post("/menus", json=payload)
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"
    collections.menu.insert_one.assert_not_called()


def test_update_menu_rejects_expired_window(client, collections):
    now = utc_now()
    r = client.patch(
        "/menus/m1",
        json={"start_date": _iso(now - timedelta(days=9)), "end_date": _iso(now - timedelta(days=2))},
    )
    assert r.status_code == 400
    collections.menu.update_one.assert_not_called()


def test_update_menu_window_and_name(client, collections):
    now = utc_now()
    r = client.patch(
        "/menus/m1",
        json={
            "name": "Late Night",
            "start_date": _iso(now + timedelta(hours=1)),
            "end_date": _iso(now + timedelta(days=7)),
        },
    )
    assert r.status_code == 200
    assert set(set_document_of(collections.menu)) == {
        "name",
        "start_date",
        "end_date",
        "updated_at",
    }


def test_update_menu_single_bound_skips_window_check(client, collections):
    r = client.patch("/menus/m1", json={"end_date": _iso(utc_now() - timedelta(days=1))})
    assert r.status_code == 200
    assert "end_date" in set_document_of(collections.menu)


def test_update_menu_end_date_is_not_checked_against_stored_start(client, collections):
    now = utc_now()
    collections.menu.find_one.return_value = make_menu_doc(start_date=now + timedelta(days=5))
    r = client.patch("/menus/m1", json={"end_date": _iso(now + timedelta(days=1))})
    assert r.status_code == 200
    collections.menu.find_one.assert_not_called()


def test_update_menu_rejects_empty_name(client, collections):
    r = client.patch("/menus/m1", json={"name": ""})
    assert r.status_code == 422
