"""
MongoDB ODM Models Package

Document schemas and input models, validated with Pydantic.

Collections:
- products: Product records with embedded reviews and seller
"""

from typing import List, Type

from beanie import Document

from shopcart.models.product import (
    MAX_SELLER_RATING,
    Product,
    ProductCreate,
    ProductPatch,
    Review,
    Seller,
)
from shopcart.models.results import DeleteSummary, OperationResult, UpdateSummary


def get_document_models() -> List[Type[Document]]:
    """Document models registered with Beanie on connect."""
    return [Product]


__all__ = [
    "MAX_SELLER_RATING",
    "Product",
    "ProductCreate",
    "ProductPatch",
    "Review",
    "Seller",
    "UpdateSummary",
    "DeleteSummary",
    "OperationResult",
    "get_document_models",
]
