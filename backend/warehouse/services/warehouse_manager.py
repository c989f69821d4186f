"""Warehouse Manager — owns one registry per item kind, reports failures without raising.

Invariants:
    - Exactly two registries (electronics, groceries), created empty at construction
    - Registries are never shared: each belongs to the manager that built it
    - increase_stock / remove_item_by_id NEVER raise a registry failure; every
      failure becomes an error report, is logged at WARNING and emitted as text
    - seed() does not report duplicates itself: it hands them back to the caller

Design Decisions:
    - Explicit kind -> registry dict: every mapping visible in one place
    - Reports are plain dicts ({"status": "ok" | "error", ...}) so callers and
      tests can branch on error_code without importing the error classes
    - Output goes through an injected emit callable (default print); the
      registries themselves never print
"""

import logging
from collections.abc import Callable
from datetime import date

from returns.result import Failure

from warehouse.core.domain_types import ItemKind
from warehouse.core.errors import DuplicateIdentity, InvalidQuantity, InventoryError
from warehouse.core.format_messages import (
    format_error,
    format_listing,
    format_removal,
    format_stock_increase,
    listing_heading,
)
from warehouse.core.inventory_repository import InventoryRepository
from warehouse.core.items import ElectronicItem, GroceryItem
from warehouse.core.seed_data import starter_electronics, starter_groceries

logger = logging.getLogger(__name__)


def _error_report(prefix: str, error: InventoryError) -> dict:
    report = {
        "status": "error",
        "error_code": error.code,
        "item_id": error.item_id,
        "message": format_error(prefix, error),
    }
    if isinstance(error, InvalidQuantity):
        report["attempted"] = error.attempted
    return report


class WarehouseManager:
    """Composes the electronics and grocery registries."""

    def __init__(self, emit: Callable[[str], None] = print):
        self._emit = emit
        self._electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
        self._groceries: InventoryRepository[GroceryItem] = InventoryRepository()

        self._repositories: dict[ItemKind, InventoryRepository] = {
            ItemKind.ELECTRONIC: self._electronics,
            ItemKind.GROCERY: self._groceries,
        }

    @property
    def electronics(self) -> InventoryRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> InventoryRepository[GroceryItem]:
        return self._groceries

    def repository(self, kind: ItemKind) -> InventoryRepository:
        return self._repositories[ItemKind(kind)]

    def seed(self, reference_date: date | None = None) -> list[DuplicateIdentity]:
        """Add the starter dataset. Returns the duplicates hit on a re-seed."""
        today = reference_date or date.today()
        results = [self._electronics.add(item) for item in starter_electronics()]
        results += [self._groceries.add(item) for item in starter_groceries(today)]

        duplicates = [r.failure() for r in results if isinstance(r, Failure)]
        logger.info(
            "Seeded warehouse: %d electronics, %d groceries, %d duplicate(s)",
            len(self._electronics), len(self._groceries), len(duplicates),
        )
        return duplicates

    def print_all(self, kind: ItemKind) -> str:
        """Emit a listing of one registry. No mutation."""
        kind = ItemKind(kind)
        text = format_listing(listing_heading(kind), self.repository(kind).list_all())
        self._emit(text)
        return text

    def increase_stock(self, kind: ItemKind, item_id: int, delta: int) -> dict:
        """Add delta to an item's quantity. Failures reported, never raised."""
        kind = ItemKind(kind)
        repo = self.repository(kind)

        found = repo.get_by_id(item_id)
        if isinstance(found, Failure):
            return self._report_failure(
                "Error increasing stock", found.failure(), kind, delta=delta,
            )

        new_quantity = found.unwrap().quantity + delta
        updated = repo.update_quantity(item_id, new_quantity)
        if isinstance(updated, Failure):
            return self._report_failure(
                "Error increasing stock", updated.failure(), kind, delta=delta,
            )

        message = format_stock_increase(item_id, delta, new_quantity)
        self._emit(message)
        return {
            "status": "ok",
            "item_id": item_id,
            "quantity": new_quantity,
            "message": message,
        }

    def remove_item_by_id(self, kind: ItemKind, item_id: int) -> dict:
        """Remove one item. A missing id is reported, never raised."""
        kind = ItemKind(kind)
        removed = self.repository(kind).remove(item_id)
        if isinstance(removed, Failure):
            return self._report_failure("Error removing item", removed.failure(), kind)

        message = format_removal(item_id)
        self._emit(message)
        return {"status": "ok", "item_id": item_id, "message": message}

    def _report_failure(
        self, prefix: str, error: InventoryError, kind: ItemKind,
        delta: int | None = None,
    ) -> dict:
        report = _error_report(prefix, error)
        logger.warning(
            "%s", report["message"],
            extra={
                "error_code": error.code,
                "item_id": error.item_id,
                "item_kind": kind.value,
                "attempted": report.get("attempted"),
                "delta": delta,
            },
        )
        self._emit(report["message"])
        return report
