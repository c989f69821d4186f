"""Inventory Repository — tests for the generic registry invariants.

Tests cover:
    - add then get_by_id returns an equal item
    - duplicate add fails with DuplicateIdentity and leaves the stored item unchanged
    - get/remove/update on absent ids fail with UnknownIdentity
    - negative update fails with InvalidQuantity and leaves quantity unchanged
    - quantity check precedes existence check (absent id + negative -> InvalidQuantity)
    - list_all is a snapshot whose length tracks successful adds minus removes
    - callers cannot mutate stored items through returned copies
"""

from datetime import date

from returns.result import Failure, Success

from warehouse.core.errors import DuplicateIdentity, InvalidQuantity, UnknownIdentity
from warehouse.core.inventory_repository import InventoryRepository
from warehouse.core.items import ElectronicItem, GroceryItem


def _phone(item_id: int = 1, quantity: int = 50) -> ElectronicItem:
    return ElectronicItem(
        id=item_id, name="Smartphone", quantity=quantity,
        brand="Samsung", warranty_months=24,
    )


# ─── add / get_by_id ─────────────────────────────────────────────

def test_new_repository_is_empty():
    repo = InventoryRepository[ElectronicItem]()
    assert len(repo) == 0
    assert repo.list_all() == []


def test_add_then_get_returns_equal_item(smartphone):
    repo = InventoryRepository[ElectronicItem]()
    assert repo.add(smartphone) == Success(None)
    found = repo.get_by_id(1)
    assert isinstance(found, Success)
    assert found.unwrap() == smartphone


def test_add_grocery_item(milk):
    repo = InventoryRepository[GroceryItem]()
    repo.add(milk)
    assert 101 in repo
    assert repo.get_by_id(101).unwrap().expiry_date == date(2026, 10, 25)


def test_duplicate_add_fails_and_keeps_first_item():
    repo = InventoryRepository[ElectronicItem]()
    first = _phone(quantity=50)
    assert isinstance(repo.add(first), Success)

    result = repo.add(
        ElectronicItem(id=1, name="Duplicate Phone", quantity=10, brand="Test", warranty_months=12),
    )
    assert isinstance(result, Failure)
    assert result.failure() == DuplicateIdentity(1)
    assert repo.get_by_id(1).unwrap() == first
    assert len(repo) == 1


def test_get_absent_id_fails():
    repo = InventoryRepository[ElectronicItem]()
    result = repo.get_by_id(42)
    assert isinstance(result, Failure)
    assert result.failure() == UnknownIdentity(42)


# ─── remove ──────────────────────────────────────────────────────

def test_remove_present_id_then_get_fails():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone())
    assert repo.remove(1) == Success(None)
    assert repo.get_by_id(1).failure() == UnknownIdentity(1)
    assert 1 not in repo


def test_remove_absent_id_fails():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone())
    result = repo.remove(2)
    assert isinstance(result, Failure)
    err = result.failure()
    assert isinstance(err, UnknownIdentity)
    assert err.item_id == 2
    assert err.message.startswith("Cannot remove.")
    assert len(repo) == 1


def test_removed_id_can_be_added_again():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone())
    repo.remove(1)
    assert isinstance(repo.add(_phone(quantity=5)), Success)
    assert repo.get_by_id(1).unwrap().quantity == 5


# ─── update_quantity ─────────────────────────────────────────────

def test_update_quantity_sets_new_value():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone(quantity=50))
    assert repo.update_quantity(1, 60) == Success(None)
    assert repo.get_by_id(1).unwrap().quantity == 60


def test_update_quantity_to_zero_allowed():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone())
    assert isinstance(repo.update_quantity(1, 0), Success)
    assert repo.get_by_id(1).unwrap().quantity == 0


def test_update_quantity_changes_nothing_else():
    repo = InventoryRepository[ElectronicItem]()
    original = _phone()
    repo.add(original)
    repo.update_quantity(1, 7)
    updated = repo.get_by_id(1).unwrap()
    assert updated.model_dump(exclude={"quantity"}) == original.model_dump(exclude={"quantity"})


def test_negative_update_fails_and_keeps_quantity():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone(quantity=50))
    result = repo.update_quantity(1, -5)
    assert isinstance(result, Failure)
    assert result.failure() == InvalidQuantity(1, -5)
    assert repo.get_by_id(1).unwrap().quantity == 50


def test_update_absent_id_fails():
    repo = InventoryRepository[ElectronicItem]()
    result = repo.update_quantity(999, 5)
    err = result.failure()
    assert isinstance(err, UnknownIdentity)
    assert err.item_id == 999
    assert err.message.startswith("Cannot update.")


def test_negative_update_on_absent_id_reports_invalid_quantity():
    repo = InventoryRepository[ElectronicItem]()
    result = repo.update_quantity(999, -5)
    assert result.failure() == InvalidQuantity(999, -5)


# ─── list_all ────────────────────────────────────────────────────

def test_list_all_length_tracks_adds_and_removes():
    repo = InventoryRepository[ElectronicItem]()
    for item_id in (1, 2, 3):
        repo.add(_phone(item_id))
    repo.add(_phone(2))
    repo.remove(3)
    items = repo.list_all()
    assert len(items) == 2
    assert {item.id for item in items} == {1, 2}


def test_list_all_snapshot_unaffected_by_later_mutation():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone(1, quantity=50))
    snapshot = repo.list_all()

    repo.update_quantity(1, 99)
    repo.add(_phone(2))
    repo.remove(1)

    assert len(snapshot) == 1
    assert snapshot[0].quantity == 50


# ─── Ownership ───────────────────────────────────────────────────

def test_mutating_added_item_does_not_touch_stored_copy():
    repo = InventoryRepository[ElectronicItem]()
    item = _phone(quantity=50)
    repo.add(item)
    item.quantity = 1
    assert repo.get_by_id(1).unwrap().quantity == 50


def test_mutating_returned_item_does_not_touch_stored_copy():
    repo = InventoryRepository[ElectronicItem]()
    repo.add(_phone(quantity=50))
    repo.get_by_id(1).unwrap().quantity = 1
    assert repo.get_by_id(1).unwrap().quantity == 50
