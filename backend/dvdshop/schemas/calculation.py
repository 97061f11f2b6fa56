"""Calculation Schemas — Pydantic models for the /calculate endpoints.

Invariants:
    - CalculateRequest.items: list of strings (no coercion from numbers/null)
    - Response numbers are plain decimals; discountApplied is null or "<n>%"
    - Wire format is camelCase (alias), Python attributes are snake_case

Design Decisions:
    - StrictStr elements: a number in items is a client bug, not a title
    - Response built from PriceFormatter.format_json() so the JSON view has one source
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class CalculateRequest(BaseModel):
    """Cart submission: raw titles, one per element."""
    items: list[StrictStr]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SpecialItemsBreakdown(_CamelModel):
    """Special-collection contribution."""
    count: int = Field(ge=0)
    base_price: float
    discounted_price: float


class OtherItemsBreakdown(_CamelModel):
    """Standard items contribution (never discounted)."""
    count: int = Field(ge=0)
    price: float


class CalculationBreakdown(_CamelModel):
    special_items: SpecialItemsBreakdown
    other_items: OtherItemsBreakdown


class CalculateResponse(_CamelModel):
    """Calculation result as exposed over HTTP."""
    total_price: float
    currency: str
    formatted_price: str
    items_count: int = Field(ge=0)
    discount_applied: str | None
    breakdown: CalculationBreakdown


class ReceiptResponse(BaseModel):
    """Plain-text receipt plus the one-line summary."""
    receipt: str
    summary: str
