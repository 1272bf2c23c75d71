"""
Database module initialization.
Exports database components for use throughout the application.
"""

from shopcart.database.base import BaseDocument, utc_now
from shopcart.database.connection import MongoConnection, sanitize_mongodb_url

__all__ = [
    # Connection management
    "MongoConnection",
    # Base classes
    "BaseDocument",
    # Utilities
    "sanitize_mongodb_url",
    "utc_now",
]
