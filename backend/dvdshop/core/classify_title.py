"""Title Classification — deterministic title-to-PricedItem mapping.

Invariants:
    - Always returns a PricedItem (never raises, never None)
    - Title is trimmed before matching; matching is case-insensitive
    - Only ASCII digits 0-9 are read as an index (re.ASCII)
    - Only indices 1–3 classify as special; any other digit or no match is standard

Design Decisions:
    - Static table of compiled patterns tried in order, one row per title variant
    - Full-title match (anchored): "Back to the Future 1 (Director's Cut)" is standard
"""

import re

from dvdshop.core.domain_types import SpecialIndex, VALID_SPECIAL_INDICES
from dvdshop.core.priced_item import PricedItem


# Each pattern captures the collection index as group 1
_SPECIAL_TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Back to the Future\s*(\d)$", re.IGNORECASE | re.ASCII),
    re.compile(r"^Back to Future\s*(\d)$", re.IGNORECASE | re.ASCII),
    re.compile(r"^BTTF\s*(\d)$", re.IGNORECASE | re.ASCII),
    re.compile(r"^Retour vers le futur\s*(\d)$", re.IGNORECASE | re.ASCII),
)


def match_special_index(title: str) -> SpecialIndex | None:
    """Return the collection index for a trimmed title, or None."""
    for pattern in _SPECIAL_TITLE_PATTERNS:
        match = pattern.match(title)
        if match is None:
            continue
        index = int(match.group(1))
        if index in VALID_SPECIAL_INDICES:
            return SpecialIndex(index)
    return None


def classify(title: str, standard_price: float, special_price: float) -> PricedItem:
    """Classify a raw title into a standard or special-collection item."""
    normalized = title.strip()
    index = match_special_index(normalized)
    if index is None:
        return PricedItem(title=normalized, price=standard_price)
    return PricedItem(
        title=normalized,
        price=special_price,
        is_special=True,
        special_index=index,
    )


def is_special_item(item: PricedItem) -> bool:
    """True for special-collection items that carry an index."""
    return item.is_special and item.special_index is not None
