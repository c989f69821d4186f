"""Seed Data — the fixed starter dataset for a fresh warehouse.

Invariants:
    - Electronics use ids 1-3, groceries ids 101-103 (no overlap needed, but kept apart)
    - Expiry dates are relative to the reference date passed in
"""

from datetime import date, timedelta

from warehouse.core.items import ElectronicItem, GroceryItem


def starter_electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24),
        ElectronicItem(id=2, name="Laptop", quantity=30, brand="Dell", warranty_months=36),
        ElectronicItem(id=3, name="Headphones", quantity=100, brand="Sony", warranty_months=12),
    ]


def starter_groceries(reference_date: date) -> list[GroceryItem]:
    return [
        GroceryItem(id=101, name="Milk", quantity=200,
                    expiry_date=reference_date + timedelta(days=7)),
        GroceryItem(id=102, name="Bread", quantity=150,
                    expiry_date=reference_date + timedelta(days=3)),
        GroceryItem(id=103, name="Eggs", quantity=300,
                    expiry_date=reference_date + timedelta(days=21)),
    ]
