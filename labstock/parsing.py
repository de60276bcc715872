"""Turn raw form/record values into prices and quantities."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import List, Tuple

from labstock.errors import ParseError

PRICE_MESSAGE = "Unit Price must be a positive number."
QUANTITY_MESSAGE = "Quantity must be zero or a positive integer."


def parse_price(raw) -> Decimal:
    """Parse a unit price. Accepts Decimal, int, float or a numeric string."""
    if isinstance(raw, bool) or raw is None:
        raise ParseError(PRICE_MESSAGE)
    if isinstance(raw, Decimal):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            raise ParseError(PRICE_MESSAGE)
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise ParseError(PRICE_MESSAGE) from exc
    if not value.is_finite():
        raise ParseError(PRICE_MESSAGE)
    return value


def parse_quantity(raw) -> int:
    """Parse a whole-number quantity; '5.0' and 5.0 are accepted, '5.5' is not."""
    if isinstance(raw, bool) or raw is None:
        raise ParseError(QUANTITY_MESSAGE)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        raise ParseError(QUANTITY_MESSAGE)
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ParseError(QUANTITY_MESSAGE) from exc
    if not value.is_finite() or value != value.to_integral_value():
        raise ParseError(QUANTITY_MESSAGE)
    return int(value)


def parse_item_fields(price_raw, quantity_raw) -> Tuple[Decimal, int]:
    """Parse both numeric item fields, reporting every failure at once."""
    messages: List[str] = []
    price = quantity = None
    try:
        price = parse_price(price_raw)
    except ParseError as exc:
        messages.extend(exc.messages)
    try:
        quantity = parse_quantity(quantity_raw)
    except ParseError as exc:
        messages.extend(exc.messages)
    if messages:
        raise ParseError(messages)
    return price, quantity
