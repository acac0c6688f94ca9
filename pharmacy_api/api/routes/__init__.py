"""
Hand-written API routes that do not fit the generic per-table CRUD contract.

- Sales: point-of-sale checkout

Routers are included from pharmacy_api.api.main (under the /api/v1 prefix).
"""
