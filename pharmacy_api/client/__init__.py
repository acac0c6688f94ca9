"""
Python client for the pharmacy API: an HTTP client, the point-of-sale cart and
the module-switching controller that drives both.
"""

from .api import ApiClient, ApiError  # noqa: F401
from .cart import Cart, CartLine, CartResult  # noqa: F401
from .controller import AppController, Banner  # noqa: F401
