import os
import tempfile
from pathlib import Path

import pytest

# The database URL must be in place before the app (and its settings) is imported.
_DB_DIR = tempfile.mkdtemp(prefix="pharmacy-tests-")
DB_PATH = Path(_DB_DIR) / "pharmacy.db"
os.environ["DATABASE_URL"] = f"sqlite:///{DB_PATH}"
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["AUTO_SEED"] = "false"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from pharmacy_api.api.main import app  # noqa: E402
from pharmacy_api.db import models  # noqa: E402,F401
from pharmacy_api.db.base import Base  # noqa: E402

API = "/api/v1"


@pytest.fixture(scope="session")
def sync_engine():
    engine = create_engine(f"sqlite:///{DB_PATH}")
    yield engine
    engine.dispose()


@pytest.fixture
def client(sync_engine):
    Base.metadata.create_all(bind=sync_engine)
    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture
def count_rows(sync_engine):
    def _count(table: str) -> int:
        with sync_engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()

    return _count


@pytest.fixture
def fetch_row(sync_engine):
    def _fetch(sql: str, **params):
        with sync_engine.connect() as conn:
            row = conn.execute(text(sql), params).mappings().first()
            return dict(row) if row is not None else None

    return _fetch


def create(client, path: str, payload: dict) -> int:
    response = client.post(f"{API}{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.fixture
def manufacturer_id(client):
    return create(client, "/manufacturers", {"manufacturer_name": "Acme Pharma", "phone": "555-0100"})


@pytest.fixture
def ingredient_id(client):
    return create(client, "/active-ingredients", {"ingredient_name": "Paracetamol"})


@pytest.fixture
def product_id(client, manufacturer_id, ingredient_id):
    return create(
        client,
        "/products",
        {
            "product_name": "Paracetamol 500mg",
            "manufacturer_id": manufacturer_id,
            "price": 5.75,
            "active_ingredient_id": ingredient_id,
            "stock_quantity": 10,
        },
    )


@pytest.fixture
def supplier_id(client):
    return create(client, "/suppliers", {"supplier_name": "MedSupply Ltd"})


@pytest.fixture
def customer_id(client):
    return create(client, "/customers", {"customer_name": "Jane Doe", "phone": "555-1234"})
