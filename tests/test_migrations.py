import pytest
from sqlalchemy import create_engine, inspect

from pharmacy_api.db.run_migrations import main as run_alembic

TABLES = {
    "tbl_crm_user",
    "tbl_manufacturers",
    "tbl_active_ingredients",
    "tbl_products",
    "tbl_inventory",
    "tbl_suppliers",
    "tbl_purchase_orders",
    "tbl_customers",
    "tbl_sales",
}


def test_upgrade_and_downgrade(tmp_path, monkeypatch):
    db_file = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")

    run_alembic(["upgrade", "head"])
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        assert TABLES <= set(inspector.get_table_names())
        fks = inspector.get_foreign_keys("tbl_products")
        assert {fk["referred_table"] for fk in fks} == {"tbl_manufacturers", "tbl_active_ingredients"}

        run_alembic(["downgrade", "base"])
        assert not TABLES & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


@pytest.mark.parametrize("argv", [[], ["stamp"]])
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit):
        run_alembic(argv)
