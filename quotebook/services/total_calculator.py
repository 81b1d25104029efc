"""Document total calculation.

Totals are derived from the line items and the tax rate only; values a
caller passes in for ``total``, ``sub_total``, ``tax_amount`` or
``total_amount`` are never trusted. Every derived value is rounded half-up
to cents as soon as it is produced:

    item total   = round2(quantity x unit_price)
    sub_total    = round2(sum(item totals))
    tax_amount   = round2(sub_total x tax_rate)
    total_amount = round2(sub_total + tax_amount)
"""

from dataclasses import replace
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, List, Optional, Union

from quotebook.models.schemas import DocumentTotals, LineItem

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")
ZERO = Decimal("0")

# Enough digits for the product of any two floats, kept to the cent
CALCULATION_CONTEXT = Context(prec=700, rounding=ROUND_HALF_UP)


def _to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps 9.995 as 9.995 instead of its binary approximation
    return Decimal(str(value))


def _round_decimal(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def round2(value: Optional[Number]) -> float:
    """Round a value to 2 decimal places using half-up rounding."""
    with localcontext(CALCULATION_CONTEXT):
        return float(_round_decimal(_to_decimal(value)))


def _line_total(quantity: Optional[Number], unit_price: Optional[Number]) -> Decimal:
    # Negative inputs count as zero
    qty = max(_to_decimal(quantity), ZERO)
    price = max(_to_decimal(unit_price), ZERO)
    return _round_decimal(qty * price)


def calculate_line_total(quantity: Optional[Number], unit_price: Optional[Number]) -> float:
    """Total of one line item, rounded to cents."""
    with localcontext(CALCULATION_CONTEXT):
        return float(_line_total(quantity, unit_price))


def with_line_totals(items: Iterable[LineItem]) -> List[LineItem]:
    """Return copies of ``items`` with each ``total`` recomputed."""
    return [
        replace(item, total=calculate_line_total(item.quantity, item.unit_price))
        for item in items
    ]


def calculate_totals(items: Iterable[LineItem], tax_rate: Optional[Number] = None) -> DocumentTotals:
    """
    Derive sub total, tax amount and total amount for a document.

    Args:
        items: Line items; only ``quantity`` and ``unit_price`` are read
        tax_rate: Optional tax rate as a fraction (0.08 for 8%)

    Returns:
        DocumentTotals with every amount rounded to cents
    """
    with localcontext(CALCULATION_CONTEXT):
        sub_total = _round_decimal(
            sum((_line_total(item.quantity, item.unit_price) for item in items), ZERO)
        )
        tax_amount = _round_decimal(sub_total * _to_decimal(tax_rate))
        total_amount = _round_decimal(sub_total + tax_amount)

    return DocumentTotals(
        sub_total=float(sub_total),
        tax_amount=float(tax_amount),
        total_amount=float(total_amount),
    )
