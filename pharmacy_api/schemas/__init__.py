"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by domain module (catalog, inventory, procurement, sales,
users) and also include the common message envelope and reusable field types.
"""

from .common import MessageResponse  # noqa: F401
