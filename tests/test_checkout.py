from datetime import date

from sqlalchemy.exc import OperationalError

from conftest import API
from pharmacy_api.repositories.sales import SaleRepository

CHECKOUT = f"{API}/sales/checkout"


def cart(product_id: int, **customer) -> dict:
    return {
        **customer,
        "items": [
            {"product_id": product_id, "quantity": 2, "price_at_sale": 5.75},
            {"product_id": product_id, "quantity": 1, "price_at_sale": "10.00"},
        ],
    }


def test_checkout_records_one_sale_with_cart_total(client, product_id, count_rows):
    response = client.post(CHECKOUT, json=cart(product_id, customer_name="Ann Lee", customer_phone="555-0001"))
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Sale processed successfully."
    assert body["id"] == body["sale_id"]
    assert body["total_amount"] == 21.5

    sale = client.get(f"{API}/sales", params={"id": body["sale_id"]}).json()
    assert sale["customer_id"] == body["customer_id"]
    assert sale["sale_date"] == date.today().isoformat()
    assert sale["status"] == "completed"
    assert sale["total_amount"] == 21.5
    assert count_rows("tbl_sales") == 1


def test_checkout_does_not_touch_stock(client, product_id):
    before = client.get(f"{API}/products", params={"id": product_id}).json()["stock_quantity"]
    client.post(CHECKOUT, json=cart(product_id))
    after = client.get(f"{API}/products", params={"id": product_id}).json()["stock_quantity"]
    assert after == before == 10


def test_checkout_reuses_customer_by_phone_then_by_name(client, product_id, customer_id, count_rows):
    by_phone = client.post(CHECKOUT, json=cart(product_id, customer_name="Someone Else", customer_phone="555-1234"))
    assert by_phone.json()["customer_id"] == customer_id

    by_name = client.post(CHECKOUT, json=cart(product_id, customer_name="Jane Doe"))
    assert by_name.json()["customer_id"] == customer_id
    assert count_rows("tbl_customers") == 1


def test_checkout_creates_walk_in_customer(client, product_id):
    body = client.post(CHECKOUT, json=cart(product_id, customer_name="", customer_phone="")).json()
    customer = client.get(f"{API}/customers", params={"id": body["customer_id"]}).json()
    assert customer["customer_name"] == "Walk-in customer"
    assert customer["phone"] is None

    again = client.post(CHECKOUT, json=cart(product_id)).json()
    assert again["customer_id"] != body["customer_id"]


def test_checkout_rejects_empty_cart_and_bad_lines(client, product_id, count_rows):
    empty = client.post(CHECKOUT, json={"customer_name": "Ann", "items": []})
    assert empty.status_code == 400
    assert empty.json()["message"] == "Missing or invalid required fields: items."

    zero = client.post(
        CHECKOUT, json={"items": [{"product_id": product_id, "quantity": 0, "price_at_sale": 1}]}
    )
    assert zero.status_code == 400

    negative = client.post(
        CHECKOUT, json={"items": [{"product_id": product_id, "quantity": 1, "price_at_sale": -1}]}
    )
    assert negative.status_code == 400
    assert count_rows("tbl_sales") == 0
    assert count_rows("tbl_customers") == 0


def test_checkout_rejects_values_the_sale_columns_cannot_hold(client, product_id, count_rows):
    huge_quantity = client.post(
        CHECKOUT, json={"items": [{"product_id": product_id, "quantity": 2**31, "price_at_sale": 1}]}
    )
    assert huge_quantity.status_code == 400

    huge_total = client.post(
        CHECKOUT,
        json={"items": [{"product_id": product_id, "quantity": 1000, "price_at_sale": "99999999.99"}]},
    )
    assert huge_total.status_code == 400
    assert huge_total.json()["message"] == "Missing or invalid required fields: items."

    long_phone = client.post(CHECKOUT, json={**cart(product_id), "customer_phone": "5" * 51})
    assert long_phone.status_code == 400
    assert long_phone.json()["message"] == "Missing or invalid required fields: customer_phone."
    assert count_rows("tbl_sales") == 0
    assert count_rows("tbl_customers") == 0


def test_failed_checkout_rolls_back_new_customer(client, count_rows, monkeypatch):
    async def broken_add_sale(self, sale):
        raise OperationalError("INSERT INTO tbl_sales", {}, Exception("disk I/O error"))

    monkeypatch.setattr(SaleRepository, "add_sale", broken_add_sale)
    response = client.post(
        CHECKOUT,
        json={"customer_name": "New Person", "items": [{"product_id": 1, "quantity": 1, "price_at_sale": 2}]},
    )
    assert response.status_code == 500
    assert "disk I/O" not in response.text
    assert count_rows("tbl_customers") == 0
    assert count_rows("tbl_sales") == 0
