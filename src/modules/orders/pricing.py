"""Line-item normalization and order totals.

Clients send line items as loosely-typed JSON: quantities and prices
arrive as numbers, numeric strings, blanks or garbage.  Nothing here
rejects input.  Every value without a usable numeric reading falls back
to a fixed default:

- ``qty``: unreadable or zero becomes ``1`` (an explicit ``0`` is
  indistinguishable from a missing quantity).
- ``price`` and ``mrp``: unreadable becomes ``0``.
- ``line_total`` is ``price * qty`` in plain float arithmetic; a product
  that overflows to infinity becomes ``0``, and so does an overflowing
  order total.
- ``productId`` and ``note`` are copied when truthy, otherwise ``None``
  and ``""``.  ``productName`` is copied as-is.

Amounts are only rounded when the caller passes a ``precision``.

All functions are pure and never raise.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Optional

from modules.orders.constants import DEFAULT_MRP, DEFAULT_PRICE, DEFAULT_QUANTITY
from modules.orders.dtos import OrderLineItem, PricedItems, RawLineItem

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_LITERALS = (
    (re.compile(r"0[xX]([0-9a-fA-F]+)"), 16),
    (re.compile(r"0[oO]([0-7]+)"), 8),
    (re.compile(r"0[bB]([01]+)"), 2),
)


# ---------------------------------------------------------------------------
# Numeric reading
# ---------------------------------------------------------------------------


def to_number(value: Any) -> float:
    """Read *value* as a number the way a loosely-typed client means it.

    Numbers are taken as-is, booleans read as 1/0, strings are trimmed
    (blank reads as 0) and must be a decimal or 0x/0o/0b literal.
    Returns ``nan`` when there is no finite numeric reading.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (Real, Decimal)):
        number = _as_float(value)
    elif isinstance(value, str):
        number = _parse_text(value.strip())
    else:
        return math.nan
    return number if math.isfinite(number) else math.nan


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (OverflowError, ValueError):
        return math.nan


def _parse_text(text: str) -> float:
    if not text:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(text):
        return _as_float(text)
    for pattern, radix in _RADIX_LITERALS:
        match = pattern.fullmatch(text)
        if match:
            return _as_float(int(match.group(1), radix))
    return math.nan


def _number_or(value: Any, default: float) -> float:
    number = to_number(value)
    if math.isnan(number) or number == 0:
        return default
    return number


def _finite_or(amount: float, default: float) -> float:
    return amount if math.isfinite(amount) else default


def _round(amount: float, precision: Optional[int]) -> float:
    return amount if precision is None else round(amount, precision)


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


def normalize_line_item(raw: Any, precision: Optional[int] = None) -> OrderLineItem:
    """Map one untrusted line item onto the canonical ``OrderLineItem``."""
    item = RawLineItem.from_untrusted(raw)

    qty = _number_or(item.qty, DEFAULT_QUANTITY)
    price = _number_or(item.price, DEFAULT_PRICE)
    mrp = _number_or(item.mrp, DEFAULT_MRP)

    if item.product_id:
        product_id: Optional[str] = str(item.product_id)
    else:
        product_id = None

    if item.product_name is None:
        product_name: Optional[str] = None
    else:
        product_name = str(item.product_name)

    return OrderLineItem(
        product_id=product_id,
        product_name=product_name,
        mrp=mrp,
        price=price,
        qty=qty,
        line_total=_round(_finite_or(price * qty, DEFAULT_PRICE), precision),
        note=str(item.note) if item.note else "",
    )


def normalize_line_items(
    raw_items: Iterable[Any], precision: Optional[int] = None
) -> list[OrderLineItem]:
    """Normalize every raw item, preserving submission order."""
    return [normalize_line_item(raw, precision) for raw in raw_items]


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


def compute_total_amount(
    items: Iterable[OrderLineItem], precision: Optional[int] = None
) -> float:
    """Sum the line totals; a missing or falsy ``line_total`` counts as 0."""
    total = 0.0
    for item in items:
        line_total = item.line_total
        if line_total and not math.isnan(line_total):
            total += line_total
    return _round(_finite_or(total, DEFAULT_PRICE), precision)


def price_line_items(
    raw_items: Iterable[Any], precision: Optional[int] = None
) -> PricedItems:
    """Normalize *raw_items* and compute the order total in one step."""
    items = normalize_line_items(raw_items, precision)
    return PricedItems(
        items=items,
        total_amount=compute_total_amount(items, precision),
    )
