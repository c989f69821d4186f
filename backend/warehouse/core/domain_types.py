"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps int: caller-assigned, never generated
    - Item kinds are a closed set encoded as an Enum, no raw string matching

Design Decisions:
    - ItemId is a NewType over int, not a wrapper class
    - str Enums: kind tags appear as plain strings in reports and log records
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ItemKind(str, Enum):
    """The two stocked item kinds. Fixed at construction, never changes."""
    ELECTRONIC = "electronic"
    GROCERY = "grocery"


class RepositoryOperation(str, Enum):
    """Registry operations that can fail on a missing identity."""
    GET = "get"
    REMOVE = "remove"
    UPDATE = "update"
