"""
Pharmacy management backend: per-table CRUD API, sales checkout and a
Python client/controller for the point-of-sale workflow.
"""

__version__ = "0.1.0"
