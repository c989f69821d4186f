"""Inventory Items — capability protocol plus the two stocked item variants.

Invariants:
    - id, name and kind-specific fields are immutable after construction
    - quantity >= 0 at construction AND on every assignment
    - name (and brand) non-empty after stripping whitespace
    - Construction failures raise pydantic.ValidationError before an item
      can ever reach a registry

Design Decisions:
    - Protocol over ABC: the registry accepts anything shaped like an item,
      no inheritance hierarchy between variants
    - Pydantic models with per-field frozen=True: identity is locked while quantity
      stays assignable (validate_assignment keeps the >= 0 rule on updates)
    - Literal kind tag on each variant: tagged variants, no isinstance dispatch needed
"""

from datetime import date
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from warehouse.core.domain_types import ItemKind


class InventoryItem(Protocol):
    """Structural contract for anything a registry can hold."""
    id: int
    name: str
    quantity: int


class _ItemBase(BaseModel):
    """Shared fields and validation for both variants."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    name: str = Field(min_length=1, frozen=True)
    quantity: int = Field(ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ElectronicItem(_ItemBase):
    """Durable good with brand and warranty."""

    kind: Literal[ItemKind.ELECTRONIC] = Field(
        default=ItemKind.ELECTRONIC, frozen=True,
    )
    brand: str = Field(min_length=1, frozen=True)
    warranty_months: int = Field(ge=0, frozen=True)

    @field_validator("brand")
    @classmethod
    def strip_brand(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("brand cannot be empty or whitespace")
        return v

    def __str__(self) -> str:
        return (
            f"Electronic: {self.name} (ID: {self.id}), Brand: {self.brand}, "
            f"Quantity: {self.quantity}, Warranty: {self.warranty_months} months"
        )


class GroceryItem(_ItemBase):
    """Perishable good with an expiry date."""

    kind: Literal[ItemKind.GROCERY] = Field(default=ItemKind.GROCERY, frozen=True)
    expiry_date: date = Field(frozen=True)

    def __str__(self) -> str:
        return (
            f"Grocery: {self.name} (ID: {self.id}), Quantity: {self.quantity}, "
            f"Expires: {self.expiry_date:%Y-%m-%d}"
        )
