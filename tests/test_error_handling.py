"""
Error handling and edge case tests.

Covers how driver failures, timeouts and missing records surface over HTTP,
plus the response headers added by the request logging middleware.
"""

import logging

from pymongo.errors import AutoReconnect, ExecutionTimeout, ServerSelectionTimeoutError

from app.exceptions import NotFoundError, ServiceValidationError

from test_fixtures import make_collections, make_client


def test_driver_error_maps_to_500(client, collections):
    collections.menu.find.side_effect = AutoReconnect("connection reset")
    r = client.get("/menus")
    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "PERSISTENCE_ERROR"
    assert "connection reset" not in body["error"]["message"]


def test_operation_timeout_maps_to_504(client, collections):
    collections.food.aggregate.side_effect = ExecutionTimeout("operation exceeded time limit")
    r = client.get("/foods")
    assert r.status_code == 504
    assert r.json()["error"]["code"] == "PERSISTENCE_TIMEOUT"


def test_server_selection_timeout_maps_to_504(client, collections):
    collections.table.insert_one.side_effect = ServerSelectionTimeoutError("no servers")
    r = client.post("/tables", json={"number_of_guests": 2, "table_number": 1})
    assert r.status_code == 504


def test_failed_reference_lookup_is_a_server_error(client, collections):
    collections.menu.find_one.side_effect = AutoReconnect("gone")
    r = client.post(
        "/foods",
        json={"name": "Soup", "price": 4, "food_image": "soup.jpg", "menu_id": "m1"},
    )
    assert r.status_code == 500
    collections.food.insert_one.assert_not_called()


def test_not_found_body_shape(client):
    body = client.get("/tables/nowhere").json()
    assert set(body) == {"success", "error", "timestamp"}
    assert body["error"] == {"code": "NOT_FOUND", "message": "Table nowhere not found"}


def test_malformed_json_is_a_validation_error(client):
    r = client.post(
        "/tables", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_route_is_404(client):
    r = client.get("/reservations")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_request_id_and_timing_headers(client):
    r = client.get("/menus")
    assert r.headers.get("X-Request-ID")
    assert float(r.headers["X-Process-Time"]) >= 0


def test_api_prefix_is_applied():
    client = make_client(make_collections(), api_prefix="/api/v1")
    assert client.get("/api/v1/menus").status_code == 200
    assert client.get("/menus").status_code == 404


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check_up(client, collections):
    collections.food.database.command.return_value = {"ok": 1.0}
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] == "up"


def test_health_check_database_down(client, collections, caplog):
    caplog.set_level(logging.WARNING, logger="restaurant.api.health")
    collections.food.database.command.side_effect = AutoReconnect("down")
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert "database is not answering" in caplog.text


def test_service_errors_carry_default_codes():
    assert NotFoundError("Menu m1 not found").code == "NOT_FOUND"
    assert NotFoundError("x").http_status == 404
    error = ServiceValidationError("bad window", details={"end_date": "2020"}, code="WINDOW")
    assert (error.code, error.http_status, error.details) == ("WINDOW", 400, {"end_date": "2020"})


def test_client_request_id_is_echoed(client):
    r = client.get("/menus", headers={"X-Request-ID": "trace-42"})
    assert r.headers["X-Request-ID"] == "trace-42"
