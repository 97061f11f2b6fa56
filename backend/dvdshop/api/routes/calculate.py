"""Calculate Routes — price a cart of titles and return the breakdown or a receipt.

Invariants:
    - Body shape is validated by Pydantic before the handler runs
    - Over-length titles and too many items become a 400 InputValidationError
      before any pricing happens; an empty or all-blank cart prices to 0
    - Handlers hold no pricing logic: parse_titles -> calculate -> format
"""

import logging

from fastapi import APIRouter, Depends

from dvdshop.config import Settings, get_settings
from dvdshop.core.calculator import CalculationResult, Calculator
from dvdshop.core.cart_parser import EMPTY_INPUT_MESSAGE, CartParser
from dvdshop.core.errors import InputValidationError
from dvdshop.api.dependencies import get_calculator, get_formatter, get_parser
from dvdshop.infrastructure.price_formatter import PriceFormatter
from dvdshop.schemas.calculation import (
    CalculateRequest, CalculateResponse, ReceiptResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/calculate", tags=["calculate"])


def _price_cart(
    body: CalculateRequest,
    parser: CartParser,
    calculator: Calculator,
    settings: Settings,
) -> CalculationResult:
    # An empty cart is priced (total 0), not rejected
    problems = [
        problem for problem in parser.validate_titles(body.items)
        if problem != EMPTY_INPUT_MESSAGE
    ]
    if len(body.items) > settings.max_items:
        problems.append(f"Too many items (max {settings.max_items})")
    if problems:
        raise InputValidationError(problems)

    result = calculator.calculate(parser.parse_titles(body.items))
    logger.info(
        "Cart priced",
        extra={
            "items_count": result.items_count,
            "discount_applied": result.discount_applied,
            "total_price": result.total_price,
            "currency": result.currency,
        },
    )
    return result


@router.post("", response_model=CalculateResponse)
async def calculate_cart(
    body: CalculateRequest,
    parser: CartParser = Depends(get_parser),
    calculator: Calculator = Depends(get_calculator),
    formatter: PriceFormatter = Depends(get_formatter),
    settings: Settings = Depends(get_settings),
):
    """Price a list of titles and return totals with the category breakdown."""
    result = _price_cart(body, parser, calculator, settings)
    return CalculateResponse.model_validate(formatter.format_json(result))


@router.post("/receipt", response_model=ReceiptResponse)
async def calculate_receipt(
    body: CalculateRequest,
    parser: CartParser = Depends(get_parser),
    calculator: Calculator = Depends(get_calculator),
    formatter: PriceFormatter = Depends(get_formatter),
    settings: Settings = Depends(get_settings),
):
    """Price a list of titles and return the printable receipt."""
    result = _price_cart(body, parser, calculator, settings)
    return ReceiptResponse(
        receipt=formatter.format_result(result),
        summary=formatter.format_simple(result),
    )
