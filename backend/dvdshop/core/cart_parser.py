"""Cart Parser — raw text or title arrays into a classified Cart.

Invariants:
    - parse() and parse_titles() never raise for string input; blank input -> empty Cart
    - Titles are trimmed; entries blank after trimming are dropped
    - validate()/validate_titles() only report structural problems as messages;
      parsing does not depend on them having been called

Design Decisions:
    - Both entry shapes normalize to one pipeline (_build_cart)
    - Text splits on "\n" only; strip() removes a trailing "\r"
    - Prices fixed at construction: a parser instance is safe to share
"""

from collections.abc import Iterable, Sequence

from dvdshop.core.cart import Cart, create_cart
from dvdshop.core.classify_title import classify
from dvdshop.core.pricing import BTTF_DVD_PRICE, STANDARD_DVD_PRICE, PricingConfig


MAX_TITLE_LENGTH = 200
EMPTY_INPUT_MESSAGE = "Input is empty"


class CartParser:
    """Turns user-supplied titles into a Cart at fixed unit prices."""

    def __init__(
        self,
        standard_price: float = STANDARD_DVD_PRICE,
        special_price: float = BTTF_DVD_PRICE,
    ):
        self.standard_price = standard_price
        self.special_price = special_price

    @classmethod
    def from_config(cls, config: PricingConfig) -> "CartParser":
        return cls(
            standard_price=config.standard_price,
            special_price=config.special_price,
        )

    def parse(self, raw_text: str) -> Cart:
        """Parse newline-delimited text, one title per line."""
        if not raw_text or not raw_text.strip():
            return create_cart([])
        return self._build_cart(raw_text.split("\n"))

    def parse_titles(self, titles: Sequence[str]) -> Cart:
        """Parse an array of titles."""
        if not titles:
            return create_cart([])
        return self._build_cart(titles)

    def _build_cart(self, candidates: Iterable[str]) -> Cart:
        stripped = (candidate.strip() for candidate in candidates)
        return create_cart(
            classify(title, self.standard_price, self.special_price)
            for title in stripped
            if title
        )

    # ─── Structural validation ───────────────────────────────────

    def validate(self, raw_text: str) -> list[str]:
        """Structural checks on newline-delimited text. Empty list means valid."""
        if not raw_text or not raw_text.strip():
            return [EMPTY_INPUT_MESSAGE]
        return _length_errors(raw_text.split("\n"), "Line")

    def validate_titles(self, titles: Sequence[str]) -> list[str]:
        """Structural checks on an array of titles. Empty list means valid."""
        if not titles or all(not title.strip() for title in titles):
            return [EMPTY_INPUT_MESSAGE]
        return _length_errors(titles, "Item")


def _length_errors(entries: Iterable[str], label: str) -> list[str]:
    """One message per non-blank entry longer than MAX_TITLE_LENGTH (1-based)."""
    errors = []
    for number, entry in enumerate(entries, start=1):
        title = entry.strip()
        if title and len(title) > MAX_TITLE_LENGTH:
            errors.append(
                f"{label} {number}: Title too long (max {MAX_TITLE_LENGTH} characters)",
            )
    return errors
