"""
Tests for /invoices
"""

from datetime import timedelta

from test_fixtures import (
    FIXED_NOW,
    inserted_document_of,
    make_invoice_doc,
    make_order_doc,
    set_document_of,
)


def test_create_invoice_defaults(client, collections):
    order = make_order_doc()
    collections.order.find_one.return_value = order

    r = client.post("/invoices", json={"order_id": order["order_id"], "payment_method": "CASH"})
    assert r.status_code == 201
    stored = inserted_document_of(collections.invoice)
    assert stored["payment_status"] == "PENDING"
    assert stored["payment_method"] == "CASH"
    assert stored["payment_due_date"] - stored["created_at"] == timedelta(days=1)


def test_create_invoice_keeps_due_date(client, collections):
    collections.order.find_one.return_value = make_order_doc()
    client.post("/invoices", json={"order_id": "o1", "payment_due_date": FIXED_NOW.isoformat()})
    assert inserted_document_of(collections.invoice)["payment_due_date"] == FIXED_NOW


def test_create_invoice_unknown_order(client, collections):
    r = client.post("/invoices", json={"order_id": "ghost"})
    assert r.status_code == 404
    collections.invoice.insert_one.assert_not_called()


def test_create_invoice_rejects_unknown_method(client):
    r = client.post("/invoices", json={"order_id": "o1", "payment_method": "BITCOIN"})
    assert r.status_code == 422


def test_get_invoice(client, collections):
    invoice = make_invoice_doc()
    collections.invoice.find_one.return_value = invoice
    r = client.get(f"/invoices/{invoice['invoice_id']}")
    assert r.status_code == 200
    assert r.json()["payment_status"] == "PENDING"


def test_mark_invoice_paid(client, collections):
    r = client.patch("/invoices/i1", json={"payment_status": "PAID"})
    assert r.status_code == 200
    assert set_document_of(collections.invoice)["payment_status"] == "PAID"
    collections.order.find_one.assert_not_called()


def test_list_invoices(client, collections):
    collections.invoice.find.return_value = [make_invoice_doc()]
    assert client.get("/invoices").status_code == 200
