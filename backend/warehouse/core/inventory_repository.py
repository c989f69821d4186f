"""Inventory Repository — generic keyed registry for one item kind.

Invariants:
    - Keys unique: enforced at add(), never at read
    - quantity >= 0 for every stored item
    - No operation mutates state when it returns Failure
    - update_quantity checks quantity validity BEFORE identity lookup, so a
      negative quantity against an absent id reports InvalidQuantity
    - Stored items are private copies; callers only ever receive copies

Design Decisions:
    - Result values (returns.Success / returns.Failure) over raised exceptions:
      call sites are forced to branch on the failure kind
    - Dict keyed by id: listing order is not part of the contract
    - Single owner, no locking: wrap in a lock if a caller ever shares it
"""

import copy
from typing import Generic, TypeVar

from returns.result import Failure, Result, Success

from warehouse.core.domain_types import ItemId, RepositoryOperation
from warehouse.core.errors import DuplicateIdentity, InvalidQuantity, UnknownIdentity
from warehouse.core.items import InventoryItem

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(Generic[T]):
    """Keyed collection of items of one kind. Pure, no IO."""

    def __init__(self) -> None:
        self._items: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def add(self, item: T) -> Result[None, DuplicateIdentity]:
        if item.id in self._items:
            return Failure(DuplicateIdentity(ItemId(item.id)))
        self._items[item.id] = copy.copy(item)
        return Success(None)

    def get_by_id(self, item_id: int) -> Result[T, UnknownIdentity]:
        item = self._items.get(item_id)
        if item is None:
            return Failure(UnknownIdentity(ItemId(item_id), RepositoryOperation.GET))
        return Success(copy.copy(item))

    def remove(self, item_id: int) -> Result[None, UnknownIdentity]:
        if item_id not in self._items:
            return Failure(
                UnknownIdentity(ItemId(item_id), RepositoryOperation.REMOVE),
            )
        del self._items[item_id]
        return Success(None)

    def update_quantity(
        self, item_id: int, new_quantity: int,
    ) -> Result[None, InvalidQuantity | UnknownIdentity]:
        """Set quantity in place. Checks: quantity >= 0, then existence."""
        if new_quantity < 0:
            return Failure(InvalidQuantity(ItemId(item_id), new_quantity))

        item = self._items.get(item_id)
        if item is None:
            return Failure(
                UnknownIdentity(ItemId(item_id), RepositoryOperation.UPDATE),
            )

        item.quantity = new_quantity
        return Success(None)

    def list_all(self) -> list[T]:
        """Snapshot of every stored item. Order not guaranteed."""
        return [copy.copy(item) for item in self._items.values()]
