"""Tests for optional Logfire setup."""

from shopcart.config import Settings
from shopcart.models import OperationResult
from shopcart.observability import initialize_logfire


def test_logfire_disabled_without_token() -> None:
    settings = Settings(_env_file=None, logfire_token="")

    assert initialize_logfire(settings) is False


def test_operation_result_summaries() -> None:
    assert str(OperationResult(operation="find", status="ok", value=[1, 2])) == "find: 2 products"
    assert str(OperationResult(operation="find", status="no_match", value=[])) == (
        "find: no matching products"
    )
