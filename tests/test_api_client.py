import json
from unittest.mock import MagicMock

import pytest
import requests

from pharmacy_api.client.api import ApiClient, ApiError


def make_response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test/api/v1/products"
    response._content = b"" if body is None else json.dumps(body).encode()
    return response


@pytest.fixture
def session():
    fake = MagicMock(spec=requests.Session)
    fake.headers = {}
    return fake


@pytest.fixture
def api(session):
    return ApiClient(base_url="http://api.test/api/v1/", timeout=5, session=session)


def test_json_headers_are_set(api, session):
    assert session.headers["Content-Type"] == "application/json"
    assert session.headers["Accept"] == "application/json"


def test_get_passes_id_as_query_and_timeout(api, session):
    session.request.return_value = make_response(200, {"product_id": 3})
    assert api.get("products", 3) == {"product_id": 3}
    session.request.assert_called_once_with(
        "GET", "http://api.test/api/v1/products", json=None, params={"id": 3}, timeout=5
    )


def test_update_sends_body_and_id(api, session):
    session.request.return_value = make_response(200, {"message": "Product updated successfully."})
    api.update("products", 3, {"price": 6.0})
    session.request.assert_called_once_with(
        "PUT", "http://api.test/api/v1/products", json={"price": 6.0}, params={"id": 3}, timeout=5
    )


def test_server_message_is_raised_verbatim(api, session):
    session.request.return_value = make_response(404, {"message": "Product not found."})
    with pytest.raises(ApiError) as err:
        api.get("products", 99)
    assert err.value.message == "Product not found."
    assert err.value.status_code == 404


def test_error_without_message_uses_status(api, session):
    session.request.return_value = make_response(502)
    with pytest.raises(ApiError, match="API request failed with status: 502"):
        api.list("products")


def test_transport_failure_is_an_api_error(api, session):
    session.request.side_effect = requests.exceptions.ConnectionError("connection refused")
    with pytest.raises(ApiError) as err:
        api.checkout({"items": []})
    assert err.value.status_code is None
    assert "connection refused" in err.value.message


def test_checkout_posts_to_checkout_endpoint(api, session):
    session.request.return_value = make_response(201, {"message": "Sale processed successfully.", "sale_id": 7})
    assert api.checkout({"items": [1]})["sale_id"] == 7
    method, url = session.request.call_args.args
    assert (method, url) == ("POST", "http://api.test/api/v1/sales/checkout")


def test_empty_list_body(api, session):
    session.request.return_value = make_response(200, [])
    assert api.list("products") == []
