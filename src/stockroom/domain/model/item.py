"""Item record and the field rules shared by the store and the file codec.

Items are immutable and compared by value. The check and parse helpers
below are the single definition of what a valid name, quantity and price
look like; both ``InventoryStore`` and the CSV repository go through them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from stockroom.domain.exceptions import (
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
)

# ---------------------------------------------------------------------------
# Field bounds
# ---------------------------------------------------------------------------
MAX_NAME_BYTES = 63
MAX_QUANTITY = 1_000_000
MAX_PRICE = 1e9

# Characters the line format cannot carry inside a name.
_FORBIDDEN_NAME_CHARS = (",", "\n", "\r")
# A line starting with this is a comment, so a name cannot.
_COMMENT_PREFIX = "#"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Item:
    """One stocked product.

    ``name`` is the identity key; two items whose names differ only by
    case are the same product as far as the store is concerned.
    """

    name: str
    quantity: int
    price: float

    def __post_init__(self) -> None:
        check_name(self.name)
        if self.name != self.name.strip():
            raise InvalidNameError(
                f"Item name must not have surrounding whitespace: {self.name!r}"
            )
        check_quantity(self.quantity)
        check_price(self.price)

    @property
    def value(self) -> float:
        """Stock value of this line (quantity x price)."""
        return self.quantity * self.price

    @property
    def key(self) -> str:
        return name_key(self.name)


def name_key(name: str) -> str:
    """Case-insensitive identity key for *name*."""
    return name.casefold()


# ---------------------------------------------------------------------------
# Checks on already-typed values
# ---------------------------------------------------------------------------


def check_name(name: str) -> str:
    """Validate *name* and return it stripped of surrounding whitespace."""
    if not isinstance(name, str):
        raise InvalidNameError(
            f"Item name must be a string, got {type(name).__name__}"
        )
    stripped = name.strip()
    if not stripped:
        raise InvalidNameError("Item name is required")
    if len(stripped.encode("utf-8")) > MAX_NAME_BYTES:
        raise InvalidNameError(
            f"Item name is longer than {MAX_NAME_BYTES} bytes: {stripped!r}"
        )
    for char in _FORBIDDEN_NAME_CHARS:
        if char in stripped:
            raise InvalidNameError(
                f"Item name cannot contain {char!r}: {stripped!r}"
            )
    if stripped.startswith(_COMMENT_PREFIX):
        raise InvalidNameError(
            f"Item name cannot start with {_COMMENT_PREFIX!r}: {stripped!r}"
        )
    return stripped


def check_quantity(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise InvalidQuantityError(f"Quantity cannot be negative, got {quantity}")
    if quantity > MAX_QUANTITY:
        raise InvalidQuantityError(
            f"Quantity cannot exceed {MAX_QUANTITY}, got {quantity}"
        )
    return quantity


def check_price(price: float) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise InvalidPriceError(
            f"Price must be a number, got {type(price).__name__}"
        )
    try:
        value = float(price)
    except OverflowError:
        raise InvalidPriceError(f"Price cannot exceed {MAX_PRICE:.0f}") from None
    if not math.isfinite(value):
        raise InvalidPriceError(f"Price must be a finite number, got {price}")
    if value < 0:
        raise InvalidPriceError(f"Price cannot be negative, got {price}")
    if value > MAX_PRICE:
        raise InvalidPriceError(f"Price cannot exceed {MAX_PRICE:.0f}, got {price}")
    # -0.0 would otherwise be written back as "-0.00"
    return value if value != 0 else 0.0


# ---------------------------------------------------------------------------
# Parsers for raw text (file fields and user input)
# ---------------------------------------------------------------------------


def parse_quantity(text: str) -> int:
    """Parse a base-10 integer quantity, rejecting any trailing garbage."""
    raw = text.strip()
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidQuantityError(f"Invalid quantity: {text!r}")
    negative = raw.startswith("-")
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # Anything longer than the bound is out of range; never hand it to int()
    if len(digits) > len(str(MAX_QUANTITY)):
        if negative:
            raise InvalidQuantityError(
                f"Quantity cannot be negative, got a {len(digits)}-digit number"
            )
        raise InvalidQuantityError(
            f"Quantity cannot exceed {MAX_QUANTITY}, got a {len(digits)}-digit number"
        )
    value = int(digits)
    return check_quantity(-value if negative else value)


def parse_price(text: str) -> float:
    """Parse a decimal price; any number of fraction digits is accepted."""
    raw = text.strip()
    if not _DECIMAL_RE.fullmatch(raw):
        raise InvalidPriceError(f"Invalid price: {text!r}")
    return check_price(float(raw))


def format_price(price: float) -> str:
    """Two-decimal rendering used on disk and on screen."""
    return f"{price:.2f}"
