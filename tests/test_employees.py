"""
Tests for /employees
"""

from test_fixtures import inserted_document_of, make_employee_doc, set_document_of


def test_create_employee(client, collections):
    payload = {
        "first_name": "Lucia",
        "last_name": "Fernandez",
        "email": "lucia.fernandez@example.com",
        "role": "waiter",
    }
    r = client.post("/employees", json=payload)
    assert r.status_code == 201
    stored = inserted_document_of(collections.employee)
    assert stored["role"] == "waiter"
    assert "phone" not in stored


def test_create_employee_invalid_email(client, collections):
    r = client.post(
        "/employees",
        json={"first_name": "Lucia", "last_name": "Fernandez", "email": "not-an-email"},
    )
    assert r.status_code == 422
    collections.employee.insert_one.assert_not_called()


def test_get_employee(client, collections):
    employee = make_employee_doc()
    collections.employee.find_one.return_value = employee
    r = client.get(f"/employees/{employee['employee_id']}")
    assert r.status_code == 200
    assert r.json()["email"] == employee["email"]


def test_get_employee_not_found(client):
    assert client.get("/employees/nobody").status_code == 404


def test_update_employee_role(client, collections):
    r = client.patch("/employees/e1", json={"role": "manager"})
    assert r.status_code == 200
    assert set_document_of(collections.employee)["role"] == "manager"


def test_list_employees(client, collections):
    collections.employee.find.return_value = [make_employee_doc(), make_employee_doc(first_name="Kenji")]
    assert [e["first_name"] for e in client.get("/employees").json()] == ["Amara", "Kenji"]
