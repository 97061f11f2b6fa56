"""Domain Types — rich types that replace bare primitives in pricing logic.

Invariants:
    - SpecialIndex is always one of VALID_SPECIAL_INDICES (1, 2, 3)
    - Item categories encoded as an Enum, never raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

SpecialIndex = NewType("SpecialIndex", int)   # 1–3


# ─── Constants ───────────────────────────────────────────────────

VALID_SPECIAL_INDICES: frozenset[int] = frozenset({1, 2, 3})


# ─── Enums ───────────────────────────────────────────────────────

class ItemCategory(str, Enum):
    """Pricing category assigned by the title classifier."""
    STANDARD = "standard"
    SPECIAL = "special"
