"""
Core application utilities for settings, logging and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Structured logging with request correlation ids
- Password hashing helpers
- Dependency helpers (request-scoped DB session)
"""
