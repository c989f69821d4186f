"""Root conftest — shared test configuration and item builders."""

import os
from datetime import date

import pytest

# Pin settings so a local .env or shell export cannot change test behavior
os.environ["WAREHOUSE_LOG_LEVEL"] = "INFO"
os.environ["WAREHOUSE_LOG_FORMAT"] = "text"

from warehouse.core.items import ElectronicItem, GroceryItem  # noqa: E402


@pytest.fixture
def smartphone() -> ElectronicItem:
    return ElectronicItem(
        id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24,
    )


@pytest.fixture
def milk() -> GroceryItem:
    return GroceryItem(id=101, name="Milk", quantity=200, expiry_date=date(2026, 10, 25))
