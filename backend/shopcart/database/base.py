"""
Base document class for Beanie ODM.

This module provides:
- utc_now: Timezone-aware default factory for timestamp fields
- BaseDocument: Base class combining Document with common settings
"""

from datetime import datetime, timezone

from beanie import Document


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class BaseDocument(Document):
    """
    Base document class for all Shopcart models.

    Provides:
    - Unset optional fields are left out of stored documents
    - Common configuration settings
    """

    class Settings:
        # Use the class name as collection name by default
        # Override in subclasses if needed
        keep_nulls = False
