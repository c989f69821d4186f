"""Inventory Message Formatting — pure text rendering for listings and reports.

Invariants:
    - All functions are pure (no IO, no printing)
    - Error lines always include the error message, which names the item id
      (and the attempted quantity for InvalidQuantity)

Design Decisions:
    - Kept out of the registry: the registry returns data, the manager decides
      where the text goes
"""

from collections.abc import Iterable

from warehouse.core.domain_types import ItemKind
from warehouse.core.errors import InventoryError
from warehouse.core.items import InventoryItem

EMPTY_LISTING_MESSAGE = "No items found."

_HEADINGS = {
    ItemKind.ELECTRONIC: "ElectronicItems",
    ItemKind.GROCERY: "GroceryItems",
}


def listing_heading(kind: ItemKind) -> str:
    return f"=== {_HEADINGS[kind]} ==="


def format_item(item: InventoryItem) -> str:
    return str(item)


def format_listing(heading: str, items: Iterable[InventoryItem]) -> str:
    """Heading followed by one line per item, or the empty placeholder."""
    lines = [format_item(item) for item in items]
    if not lines:
        lines = [EMPTY_LISTING_MESSAGE]
    return "\n".join([heading, *lines])


def format_error(prefix: str, error: InventoryError) -> str:
    return f"{prefix}: {error.message}"


def format_stock_increase(item_id: int, delta: int, new_quantity: int) -> str:
    return (
        f"Increased stock for item ID {item_id} by {delta}. "
        f"New quantity: {new_quantity}"
    )


def format_removal(item_id: int) -> str:
    return f"Item with ID {item_id} has been removed successfully."
