"""
ORM models for the pharmacy tables: catalog (manufacturers, active
ingredients, products), inventory, procurement, sales and users.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .master_data import (  # noqa: F401
    ActiveIngredient,
    Manufacturer,
    Product,
)
from .inventory import (  # noqa: F401
    InventoryItem,
)
from .procurement import (  # noqa: F401
    PurchaseOrder,
    Supplier,
)
from .sales import (  # noqa: F401
    Customer,
    Sale,
)
from .security import (  # noqa: F401
    User,
)
