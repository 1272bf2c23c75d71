"""
Product operation sequences run from the CLI.

create_product() lets errors propagate to the caller. The find/update/delete
helpers catch Shopcart errors, log them and report a "failed" OperationResult,
so a call that matched nothing ("no_match") is never confused with one that
did not complete.
"""

import logging

from shopcart.database.repositories import ProductRepository
from shopcart.exceptions import ShopcartError
from shopcart.models import OperationResult, Product

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "Keyboard"
DEFAULT_UPDATE_RATE = 99.0

VERTICAL_MOUSE = {
    "name": "Vertical Mouse - HP",
    "rate": 99.50,
    "dimension": "5inX2.5inX7in",
    "reviews": [
        {"reviewer": "Alice", "rating": 5},
        {"reviewer": "Bob", "rating": 4},
    ],
    "seller": {
        "seller_name": "TechStore",
        "seller_location": "Canada",
        "seller_rating": 9,
    },
}
VERTICAL_MOUSE_SALE_RATE = 89.99


async def create_product(repo: ProductRepository) -> Product:
    """
    Create the vertical mouse product, then reprice it.

    Returns the record as created (before the reprice). Errors propagate.
    """
    product = await repo.create(VERTICAL_MOUSE)

    updated = await repo.find_one_and_update(
        {"name": VERTICAL_MOUSE["name"]},
        {"rate": VERTICAL_MOUSE_SALE_RATE},
        return_updated=True,
    )
    if updated is not None:
        logger.info(f"Repriced {updated.name!r} to {updated.rate}")

    return product


async def find_products(
    repo: ProductRepository,
    name: str = DEFAULT_PRODUCT_NAME,
) -> OperationResult:
    try:
        products = await repo.find_many({"name": name})
    except ShopcartError as e:
        logger.error(f"Error finding products: {e}")
        return OperationResult(operation="find", status="failed", error=str(e))

    logger.info(f"Total Products Found: {len(products)}")
    return OperationResult(
        operation="find",
        status="ok" if products else "no_match",
        value=products,
    )


async def update_product(
    repo: ProductRepository,
    name: str = DEFAULT_PRODUCT_NAME,
    rate: float = DEFAULT_UPDATE_RATE,
) -> OperationResult:
    try:
        summary = await repo.update_one({"name": name}, {"rate": rate})
    except ShopcartError as e:
        logger.error(f"Error updating product: {e}")
        return OperationResult(operation="update", status="failed", error=str(e))

    logger.info(f"Update {name!r}: {summary}")
    return OperationResult(
        operation="update",
        status="ok" if summary.matched else "no_match",
        value=summary,
    )


async def delete_product(
    repo: ProductRepository,
    name: str = DEFAULT_PRODUCT_NAME,
) -> OperationResult:
    try:
        summary = await repo.delete_one({"name": name})
    except ShopcartError as e:
        logger.error(f"Error deleting product: {e}")
        return OperationResult(operation="delete", status="failed", error=str(e))

    logger.info(f"Delete {name!r}: {summary}")
    return OperationResult(
        operation="delete",
        status="ok" if summary.deleted else "no_match",
        value=summary,
    )


async def run_keyboard_scenario(
    repo: ProductRepository,
    rate: float = 50,
    new_rate: float = DEFAULT_UPDATE_RATE,
) -> list[OperationResult]:
    """
    Insert a keyboard, reprice it, read it back, delete it, read again.

    The insert propagates errors; later steps report through their results.
    """
    product = await repo.create({"name": DEFAULT_PRODUCT_NAME, "rate": rate})
    results = [OperationResult(operation="create", status="ok", value=product)]

    results.append(await update_product(repo, DEFAULT_PRODUCT_NAME, new_rate))
    results.append(await find_products(repo, DEFAULT_PRODUCT_NAME))
    results.append(await delete_product(repo, DEFAULT_PRODUCT_NAME))
    results.append(await find_products(repo, DEFAULT_PRODUCT_NAME))

    return results
