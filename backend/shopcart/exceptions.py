"""Shopcart exceptions."""

from typing import Any


class ShopcartError(Exception):
    """Base Shopcart exception."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DatabaseNotConnectedError(ShopcartError):
    """Operation attempted before a successful connect()."""

    def __init__(self, message: str = "Database not connected. Call connect() first."):
        super().__init__(message)


class RepositoryError(ShopcartError):
    """Data store error raised by a repository operation."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class ProductValidationError(ShopcartError):
    """Product payload failed validation before reaching the store."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc: Any, model_name: str) -> "ProductValidationError":
        """Build from a pydantic ValidationError."""
        errors = [
            {
                "field": ".".join(str(x) for x in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        fields = ", ".join(e["field"] for e in errors) or "payload"
        return cls(f"{model_name} validation failed: {fields}", errors)
