"""Shopcart CLI entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from shopcart import __version__
from shopcart.config import Settings, get_settings
from shopcart.database import MongoConnection, sanitize_mongodb_url
from shopcart.database.repositories import ProductRepository
from shopcart.demo import (
    DEFAULT_PRODUCT_NAME,
    DEFAULT_UPDATE_RATE,
    create_product,
    delete_product,
    find_products,
    run_keyboard_scenario,
    update_product,
)
from shopcart.models import OperationResult, Product

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def _init_logfire(settings: Settings) -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from shopcart.observability import initialize_logfire

        initialize_logfire(settings)
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _format_product(product: Product) -> str:
    return product.model_dump_json(by_alias=True, indent=2)


def _print_result(result: OperationResult) -> None:
    print(f"\n{result}")
    if result.operation == "find" and result.status != "failed":
        for product in result.value:
            print(_format_product(product))
        print(f"Total Products Found: {len(result.value)}")


async def _connect(settings: Settings) -> tuple[MongoConnection, ProductRepository]:
    # A failed connect is only logged; operations then fail on their own
    connection = MongoConnection(settings)
    await connection.connect()
    return connection, ProductRepository(connection)


async def _run_demo(settings: Settings) -> Product:
    connection, repo = await _connect(settings)
    try:
        return await create_product(repo)
    finally:
        await connection.close()


async def _run_helper(settings: Settings, args: argparse.Namespace) -> OperationResult:
    connection, repo = await _connect(settings)
    try:
        if args.command == "find":
            return await find_products(repo, args.name)
        if args.command == "update":
            return await update_product(repo, args.name, args.rate)
        return await delete_product(repo, args.name)
    finally:
        await connection.close()


async def _check_database(settings: Settings) -> dict:
    connection = MongoConnection(settings)
    try:
        await connection.connect()
        info = connection.info()
        if not await connection.check_connection():
            info["status"] = "unreachable"
        return info
    finally:
        await connection.close()


async def _run_scenario(settings: Settings) -> list[OperationResult]:
    connection, repo = await _connect(settings)
    try:
        return await run_keyboard_scenario(repo)
    finally:
        await connection.close()


def cmd_demo(args: argparse.Namespace) -> int:
    """Create a product, then reprice it."""
    settings = get_settings()
    _init_logfire(settings)

    try:
        product = asyncio.run(_run_demo(settings))
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=args.debug)
        print(f"\n❌ Operations failed: {e}\n")
        return 1

    print(_format_product(product))
    print("\nOperations completed successfully\n")
    return 0


def cmd_helper(args: argparse.Namespace) -> int:
    """Run one of the find/update/delete helpers."""
    settings = get_settings()
    _init_logfire(settings)

    try:
        result = asyncio.run(_run_helper(settings, args))
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=args.debug)
        print(f"\n❌ {args.command} failed: {e}\n")
        return 1

    _print_result(result)
    print()
    return 0 if result.ok else 1


def cmd_scenario(args: argparse.Namespace) -> int:
    """Run the keyboard create/update/find/delete scenario."""
    settings = get_settings()
    _init_logfire(settings)

    try:
        results = asyncio.run(_run_scenario(settings))
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=args.debug)
        print(f"\n❌ Scenario failed: {e}\n")
        return 1

    print("\n=== Keyboard Scenario ===")
    for result in results:
        _print_result(result)
    print()

    return 0 if all(result.ok for result in results) else 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display effective configuration."""
    try:
        settings = get_settings()

        print("\n=== Shopcart Configuration ===\n")
        print("MongoDB:")
        print(f"  URI: {sanitize_mongodb_url(settings.mongodb_uri)}")
        print(f"  Fallback Database: {settings.mongodb_database}")
        print(f"  Server Selection Timeout: {settings.server_selection_timeout_ms} ms\n")
        print(f"Log Level: {settings.log_level}")
        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        if args.check:
            info = asyncio.run(_check_database(settings))
        else:
            info = MongoConnection(settings).info()

        print("Database:")
        print(f"  Status: {info['status']}")
        print(f"  URL: {info['url']}")
        print(f"  Database: {info['database']}\n")

        if args.check and info["status"] != "connected":
            return 1
        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopcart",
        description="Shopcart: product records over MongoDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Shopcart {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_demo = subparsers.add_parser(
        "demo",
        help="Create the sample product and reprice it",
    )
    parser_demo.set_defaults(func=cmd_demo)

    parser_find = subparsers.add_parser(
        "find",
        help="List products with a given name",
    )
    parser_find.add_argument("--name", default=DEFAULT_PRODUCT_NAME)
    parser_find.set_defaults(func=cmd_helper)

    parser_update = subparsers.add_parser(
        "update",
        help="Set the rate of the first product with a given name",
    )
    parser_update.add_argument("--name", default=DEFAULT_PRODUCT_NAME)
    parser_update.add_argument("--rate", type=float, default=DEFAULT_UPDATE_RATE)
    parser_update.set_defaults(func=cmd_helper)

    parser_delete = subparsers.add_parser(
        "delete",
        help="Delete the first product with a given name",
    )
    parser_delete.add_argument("--name", default=DEFAULT_PRODUCT_NAME)
    parser_delete.set_defaults(func=cmd_helper)

    parser_scenario = subparsers.add_parser(
        "scenario",
        help="Run the keyboard create/update/find/delete scenario",
    )
    parser_scenario.set_defaults(func=cmd_scenario)

    parser_config = subparsers.add_parser(
        "config",
        help="Display effective configuration",
    )
    parser_config.add_argument(
        "--check",
        action="store_true",
        help="Connect and ping the database",
    )
    parser_config.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    if args.command != "config":
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"\n❌ Configuration Error: {e}\n")
            return 1
        logging.getLogger().setLevel(
            logging.DEBUG if args.debug else settings.log_level
        )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
