"""Pharmacy tables.

- tbl_crm_user
- tbl_manufacturers
- tbl_active_ingredients
- tbl_products
- tbl_inventory
- tbl_suppliers
- tbl_purchase_orders
- tbl_customers
- tbl_sales
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c1d5e7f9a20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tbl_crm_user",
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("user_pass", sa.String(255), nullable=False),
        sa.Column("user_department", sa.String(100), nullable=True),
        sa.Column("user_type", sa.String(50), nullable=True),
        sa.Column("user_status", sa.String(50), nullable=True),
    )

    op.create_table(
        "tbl_manufacturers",
        sa.Column("manufacturer_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("manufacturer_name", sa.String(255), nullable=False),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
    )

    op.create_table(
        "tbl_active_ingredients",
        sa.Column("ingredient_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("ingredient_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "tbl_products",
        sa.Column("product_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("manufacturer_id", sa.Integer(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("active_ingredient_id", sa.Integer(), nullable=True),
        sa.Column("stock_quantity", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["manufacturer_id"],
            ["tbl_manufacturers.manufacturer_id"],
            name="fk_tbl_products_manufacturer_id_tbl_manufacturers",
        ),
        sa.ForeignKeyConstraint(
            ["active_ingredient_id"],
            ["tbl_active_ingredients.ingredient_id"],
            name="fk_tbl_products_active_ingredient_id_tbl_active_ingredients",
        ),
    )

    op.create_table(
        "tbl_inventory",
        sa.Column("inventory_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("batch_number", sa.String(255), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(
            ["product_id"],
            ["tbl_products.product_id"],
            name="fk_tbl_inventory_product_id_tbl_products",
        ),
    )

    op.create_table(
        "tbl_suppliers",
        sa.Column("supplier_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_name", sa.String(255), nullable=False),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
    )

    op.create_table(
        "tbl_purchase_orders",
        sa.Column("po_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
        sa.ForeignKeyConstraint(
            ["supplier_id"],
            ["tbl_suppliers.supplier_id"],
            name="fk_tbl_purchase_orders_supplier_id_tbl_suppliers",
        ),
    )

    op.create_table(
        "tbl_customers",
        sa.Column("customer_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
    )

    op.create_table(
        "tbl_sales",
        sa.Column("sale_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("sale_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
        sa.ForeignKeyConstraint(
            ["customer_id"],
            ["tbl_customers.customer_id"],
            name="fk_tbl_sales_customer_id_tbl_customers",
        ),
    )


def downgrade() -> None:
    for table in (
        "tbl_sales",
        "tbl_customers",
        "tbl_purchase_orders",
        "tbl_suppliers",
        "tbl_inventory",
        "tbl_products",
        "tbl_active_ingredients",
        "tbl_manufacturers",
        "tbl_crm_user",
    ):
        op.drop_table(table)
