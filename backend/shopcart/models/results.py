"""Repository operation result models."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

OperationStatus = Literal["ok", "no_match", "failed"]


class UpdateSummary(BaseModel):
    """Counters returned by update_one / update_many."""

    matched_count: int = 0
    modified_count: int = 0

    @property
    def matched(self) -> bool:
        return self.matched_count > 0

    def __str__(self) -> str:
        return f"matched={self.matched_count} modified={self.modified_count}"


class DeleteSummary(BaseModel):
    """Counter returned by delete_one."""

    deleted_count: int = 0

    @property
    def deleted(self) -> bool:
        return self.deleted_count > 0

    def __str__(self) -> str:
        return f"deleted={self.deleted_count}"


class OperationResult(BaseModel):
    """
    Outcome of a helper operation.

    "no_match" is a successful call that selected nothing; "failed" means the
    call itself raised and the error was logged.
    """

    operation: str
    status: OperationStatus
    value: Any = None
    error: str | None = None
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    def __str__(self) -> str:
        """Human-readable status."""
        if self.status == "failed":
            return f"{self.operation} failed: {self.error}"
        if self.status == "no_match":
            return f"{self.operation}: no matching products"
        if isinstance(self.value, list):
            return f"{self.operation}: {len(self.value)} products"
        return f"{self.operation}: {self.value}"
