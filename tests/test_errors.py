import pytest

from conftest import API


def test_health_endpoints(client):
    assert client.get(f"{API}/health").json() == {"message": "Healthy"}
    assert client.get(f"{API}/health/db").json() == {"message": "Database reachable"}


def test_correlation_id_is_echoed_or_generated(client):
    echoed = client.get(f"{API}/health", headers={"X-Correlation-ID": "cid-123"})
    assert echoed.headers["X-Correlation-ID"] == "cid-123"

    generated = client.get(f"{API}/health")
    assert len(generated.headers["X-Correlation-ID"]) == 36


def test_database_error_is_a_generic_500(client, ingredient_id, count_rows):
    # No manufacturer 999 exists; the foreign key is enforced by the database.
    response = client.post(
        f"{API}/products",
        json={
            "product_name": "Orphan",
            "manufacturer_id": 999,
            "price": 1,
            "active_ingredient_id": ingredient_id,
            "stock_quantity": 1,
        },
        headers={"X-Correlation-ID": "cid-500"},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "An internal error occurred.", "error_id": "cid-500"}
    assert "FOREIGN KEY" not in response.text
    assert count_rows("tbl_products") == 0


def test_invalid_json_is_a_400(client):
    response = client.post(
        f"{API}/customers", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Request body is not valid JSON."}


def test_unknown_route_is_a_404_envelope(client):
    response = client.get(f"{API}/prescriptions")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_invalid_field_values_are_reported(client):
    response = client.post(
        f"{API}/customers", json={"customer_name": "Ann", "email": "not-an-email"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Missing or invalid required fields: email."
    assert body["details"][0]["field"] == "email"


def test_whitespace_only_required_field_is_rejected(client, count_rows):
    response = client.post(f"{API}/suppliers", json={"supplier_name": "   "})
    assert response.status_code == 400
    assert count_rows("tbl_suppliers") == 0


def test_largest_integer_id_is_a_404_not_a_500(client):
    response = client.get(f"{API}/products", params={"id": 2147483647})
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found."}


def test_integer_fields_beyond_column_range_are_rejected(client, manufacturer_id, ingredient_id, count_rows):
    response = client.post(
        f"{API}/products",
        json={
            "product_name": "Overstocked",
            "manufacturer_id": manufacturer_id,
            "price": 1,
            "active_ingredient_id": ingredient_id,
            "stock_quantity": 2**63,
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Missing or invalid required fields: stock_quantity."
    assert count_rows("tbl_products") == 0


@pytest.mark.parametrize(
    "path, body, field",
    [
        ("/suppliers", {"supplier_name": "x" * 256}, "supplier_name"),
        ("/customers", {"customer_name": "Ann", "phone": "5" * 51}, "phone"),
        ("/manufacturers", {"manufacturer_name": "Acme", "contact_person": "y" * 256}, "contact_person"),
    ],
)
def test_values_longer_than_their_column_are_rejected(client, count_rows, path, body, field):
    response = client.post(f"{API}{path}", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == f"Missing or invalid required fields: {field}."
    assert count_rows("tbl_" + path.strip("/")) == 0


def test_status_longer_than_its_column_is_rejected_on_create_and_update(client, supplier_id, count_rows):
    order = {"supplier_id": supplier_id, "order_date": "2024-05-01", "total_amount": 10, "status": "s" * 60}
    response = client.post(f"{API}/purchase-orders", json=order)
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "status"
    assert count_rows("tbl_purchase_orders") == 0

    po_id = client.post(f"{API}/purchase-orders", json={**order, "status": "pending"}).json()["id"]
    response = client.put(f"{API}/purchase-orders", params={"id": po_id}, json={"status": "s" * 51})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid values for fields: status."
    assert client.get(f"{API}/purchase-orders", params={"id": po_id}).json()["status"] == "pending"


def test_user_department_is_limited_to_its_column(client, count_rows):
    response = client.post(
        f"{API}/users",
        json={
            "user_id": "clerk1",
            "user_pass": "secret",
            "user_department": "d" * 101,
            "user_type": "staff",
            "user_status": "active",
        },
    )
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "user_department"
    assert count_rows("tbl_crm_user") == 0
