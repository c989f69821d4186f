"""Warehouse Demo — console entry point that drives the manager like an external caller.

Invariants:
    - The demo never lets an exception escape: unexpected errors are logged and reported
    - Expected registry failures are shown as "Expected error (...)" lines

Design Decisions:
    - Settings and logging configured once in main(), not at import time
    - run_warehouse_demo takes the manager and emit sink as arguments for testing
"""

import logging
from collections.abc import Callable

from returns.result import Failure, Result

from warehouse.config import get_settings
from warehouse.core.domain_types import ItemKind
from warehouse.core.format_messages import format_error
from warehouse.core.items import ElectronicItem
from warehouse.infrastructure.observability import setup_logging
from warehouse.services.warehouse_manager import WarehouseManager

logger = logging.getLogger(__name__)

BANNER_WIDTH = 50


def _expect_failure(emit: Callable[[str], None], label: str, result: Result) -> None:
    if isinstance(result, Failure):
        emit(format_error(f"Expected error ({label})", result.failure()))
    else:
        emit(f"Unexpected success ({label})")


def run_warehouse_demo(
    manager: WarehouseManager | None = None,
    emit: Callable[[str], None] = print,
    seed: bool = True,
) -> WarehouseManager:
    """Seed, list, provoke each failure kind, then apply two successful updates."""
    warehouse = manager or WarehouseManager(emit=emit)
    try:
        if seed:
            for duplicate in warehouse.seed():
                emit(format_error("Seed skipped", duplicate))

        warehouse.print_all(ItemKind.GROCERY)
        warehouse.print_all(ItemKind.ELECTRONIC)

        emit("\n=== Testing Error Handling ===")
        _expect_failure(
            emit, "adding duplicate",
            warehouse.electronics.add(ElectronicItem(
                id=1, name="Duplicate Phone", quantity=10,
                brand="Test", warranty_months=12,
            )),
        )
        warehouse.remove_item_by_id(ItemKind.GROCERY, 999)
        _expect_failure(
            emit, "invalid quantity",
            warehouse.electronics.update_quantity(1, -5),
        )

        emit("\n=== Demonstrating Successful Operations ===")
        warehouse.increase_stock(ItemKind.GROCERY, 101, 50)
        warehouse.remove_item_by_id(ItemKind.ELECTRONIC, 3)

        emit("\n=== Final Inventory State ===")
        warehouse.print_all(ItemKind.GROCERY)
        warehouse.print_all(ItemKind.ELECTRONIC)
    except Exception as exc:
        logger.exception("Warehouse demo failed")
        emit(f"An unexpected error occurred: {exc}")
    return warehouse


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    print("=" * BANNER_WIDTH)
    print("WAREHOUSE INVENTORY SYSTEM")
    print("=" * BANNER_WIDTH)
    run_warehouse_demo(seed=settings.seed_on_startup)


if __name__ == "__main__":
    main()
