"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries. The generic CrudRepository serves
every per-table endpoint; the sales repositories back the checkout service.
"""
