"""Error Taxonomy — typed, categorized failure values for registry operations.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are VALUES returned inside Failure(...), never raised
    - Each error carries the offending identity (and attempted value where relevant)
    - to_response() produces the same envelope for every kind

Design Decisions:
    - Frozen dataclasses over Exception subclasses: duplicate/missing/negative are
      expected outcomes, so callers branch on them instead of unwinding
    - Messages built from fields on demand: the structured fields stay the source of truth
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from warehouse.core.domain_types import ItemId, RepositoryOperation


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class InventoryError:
    """Base for all registry failures."""

    item_id: ItemId

    code: ClassVar[str] = "INVENTORY_ERROR"
    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION
    severity: ClassVar[ErrorSeverity] = ErrorSeverity.WARNING

    @property
    def message(self) -> str:
        return f"Inventory operation failed for item ID {self.item_id}."

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "item_id": self.item_id,
            }
        }


@dataclass(frozen=True)
class DuplicateIdentity(InventoryError):
    """add() called with an id already present."""

    code: ClassVar[str] = "DUPLICATE_ITEM"
    category: ClassVar[ErrorCategory] = ErrorCategory.CONFLICT

    @property
    def message(self) -> str:
        return f"Item with ID {self.item_id} already exists."


_NOT_FOUND_PREFIX = {
    RepositoryOperation.GET: "",
    RepositoryOperation.REMOVE: "Cannot remove. ",
    RepositoryOperation.UPDATE: "Cannot update. ",
}


@dataclass(frozen=True)
class UnknownIdentity(InventoryError):
    """get/remove/update_quantity called with an id not present."""

    operation: RepositoryOperation = field(
        default=RepositoryOperation.GET, compare=False,
    )

    code: ClassVar[str] = "ITEM_NOT_FOUND"
    category: ClassVar[ErrorCategory] = ErrorCategory.RESOURCE_NOT_FOUND

    @property
    def message(self) -> str:
        prefix = _NOT_FOUND_PREFIX[self.operation]
        return f"{prefix}Item with ID {self.item_id} not found."


@dataclass(frozen=True)
class InvalidQuantity(InventoryError):
    """update_quantity called with a negative quantity."""

    attempted: int = 0

    code: ClassVar[str] = "INVALID_QUANTITY"
    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION

    @property
    def message(self) -> str:
        return (
            f"Quantity cannot be negative. Attempted to set {self.attempted} "
            f"for item ID {self.item_id}."
        )

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["attempted"] = self.attempted
        return response
