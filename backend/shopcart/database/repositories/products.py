"""
ProductRepository

MongoDB operations for the 'products' collection.

Methods:
- create(data) -> Product: Validate, then insert one record
- find_one_and_update(filter, patch, return_updated) -> Optional[Product]
- find_many(filter) -> List[Product]: All matches, possibly empty
- update_one(filter, patch) -> UpdateSummary: First match only
- update_many(filter, patch) -> UpdateSummary: All matches
- delete_one(filter) -> DeleteSummary: First match only

Filters are plain field-equality mappings using stored field names,
e.g. {"name": "Keyboard"} or {"seller.seller_name": "TechStore"}.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from beanie import UpdateResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from shopcart.database.connection import MongoConnection
from shopcart.exceptions import ProductValidationError, RepositoryError
from shopcart.models.product import Product, ProductCreate, ProductPatch
from shopcart.models.results import DeleteSummary, UpdateSummary

logger = logging.getLogger(__name__)

Filter = Mapping[str, Any]
ProductData = Union[Mapping[str, Any], ProductCreate]
PatchData = Union[Mapping[str, Any], ProductPatch]


class ProductRepository:
    """CRUD operations on products over an explicit MongoConnection."""

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def create(self, data: ProductData) -> Product:
        """
        Insert one new product.

        The payload is validated before the store is touched, so an invalid
        payload stores nothing.

        Raises:
            ProductValidationError: payload failed validation (e.g. no name)
            DatabaseNotConnectedError: connect() never succeeded
            RepositoryError: the insert failed
        """
        payload = _validate_create(data)
        self._require_connection()

        product = payload.to_document()
        try:
            await product.insert()
        except PyMongoError as e:
            raise RepositoryError(f"Failed to create product: {e}", "create") from e

        logger.info(f"Created product {product.name!r} ({product.id})")
        return product

    async def find_one_and_update(
        self,
        filter: Filter,
        patch: PatchData,
        return_updated: bool = False,
    ) -> Optional[Product]:
        """
        Patch the first product matching filter.

        Returns the post-update record when return_updated is set, the
        pre-update record otherwise, or None when nothing matched.
        """
        update = _validate_patch(patch).to_update()
        self._require_connection()

        response_type = (
            UpdateResponse.NEW_DOCUMENT if return_updated else UpdateResponse.OLD_DOCUMENT
        )
        try:
            product = await Product.find_one(dict(filter)).update(
                update, response_type=response_type
            )
        except PyMongoError as e:
            raise RepositoryError(
                f"Failed to update product: {e}", "find_one_and_update"
            ) from e
        except ValidationError as e:
            raise RepositoryError(
                f"Stored product is not readable: {e}", "find_one_and_update"
            ) from e

        if product is None:
            logger.info(f"find_one_and_update: no product matched {dict(filter)}")
        return product

    async def find_many(self, filter: Filter) -> List[Product]:
        """Return every product matching filter, in natural order."""
        self._require_connection()

        try:
            products = await Product.find(dict(filter)).to_list()
        except PyMongoError as e:
            raise RepositoryError(f"Failed to find products: {e}", "find_many") from e
        except ValidationError as e:
            raise RepositoryError(f"Stored product is not readable: {e}", "find_many") from e

        logger.debug(f"find_many {dict(filter)}: {len(products)} products")
        return products

    async def update_one(self, filter: Filter, patch: PatchData) -> UpdateSummary:
        """Patch the first product matching filter."""
        update = _validate_patch(patch).to_update()
        self._require_connection()

        try:
            result = await Product.find_one(dict(filter)).update(update)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to update product: {e}", "update_one") from e

        return UpdateSummary(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def update_many(self, filter: Filter, patch: PatchData) -> UpdateSummary:
        """Patch every product matching filter."""
        update = _validate_patch(patch).to_update()
        self._require_connection()

        try:
            result = await Product.find(dict(filter)).update(update)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to update products: {e}", "update_many") from e

        return UpdateSummary(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def delete_one(self, filter: Filter) -> DeleteSummary:
        """Remove the first product matching filter."""
        self._require_connection()

        try:
            result = await Product.find_one(dict(filter)).delete()
        except PyMongoError as e:
            raise RepositoryError(f"Failed to delete product: {e}", "delete_one") from e

        deleted_count = result.deleted_count if result is not None else 0
        return DeleteSummary(deleted_count=deleted_count)

    def _require_connection(self) -> None:
        # Raises DatabaseNotConnectedError when connect() did not succeed
        self.connection.database


def _validate_create(data: ProductData) -> ProductCreate:
    if isinstance(data, ProductCreate):
        return data
    try:
        return ProductCreate.model_validate(dict(data))
    except ValidationError as e:
        raise ProductValidationError.from_pydantic(e, "Product") from e


def _validate_patch(patch: PatchData) -> ProductPatch:
    if isinstance(patch, ProductPatch):
        return patch
    try:
        return ProductPatch.model_validate(dict(patch))
    except ValidationError as e:
        raise ProductValidationError.from_pydantic(e, "Product patch") from e
