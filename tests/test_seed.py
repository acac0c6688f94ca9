import asyncio

from conftest import API

from pharmacy_api.db.seed import seed_all


def test_seed_fills_empty_tables_once(client, count_rows):
    inserted = asyncio.run(seed_all())
    assert inserted == {
        "tbl_manufacturers": 1,
        "tbl_active_ingredients": 2,
        "tbl_products": 2,
        "tbl_inventory": 2,
        "tbl_suppliers": 1,
        "tbl_customers": 1,
    }
    names = [p["product_name"] for p in client.get(f"{API}/products").json()]
    assert names == ["Paracetamol 500mg", "Ibuprofen 200mg"]

    assert asyncio.run(seed_all()) == {}
    assert count_rows("tbl_products") == 2
