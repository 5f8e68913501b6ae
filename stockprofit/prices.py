"""Price coercion and validation.

Every sample is turned into a :class:`~decimal.Decimal` before it takes part
in any comparison, so price differences never pick up binary rounding noise.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from decimal import Decimal

import numpy as np
import pandas as pd

from .errors import InvalidInputError

__all__ = [
    "MAX_VALID_PRICE",
    "MIN_SERIES_LENGTH",
    "to_price",
    "validate_price",
    "check_series",
    "check_ceiling",
]

# ──────────────────────────────────────────────────────────────────────────────
#  Price limits
# ──────────────────────────────────────────────────────────────────────────────
MAX_VALID_PRICE = Decimal("10000000")   # exclusive ceiling for a single price
MIN_SERIES_LENGTH = 2                   # one buy and one later sell


# ──────────────────────────────────────────────────────────────────────────────
#  Single samples
# ──────────────────────────────────────────────────────────────────────────────
def _where(index: int | None) -> str:
    return "price" if index is None else f"price at minute {index}"


def to_price(value, index: int | None = None) -> Decimal:
    """Convert ``value`` to a finite ``Decimal`` without range checks."""
    if value is None:
        raise InvalidInputError(f"{_where(index)} is missing")
    if isinstance(value, bool) or isinstance(value, (str, bytes)):
        raise InvalidInputError(f"{_where(index)} must be numeric, got {value!r}")

    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, numbers.Integral):
        price = Decimal(int(value))
    elif isinstance(value, np.floating):
        # numpy repr is shortest for its own width, float32 0.1 stays "0.1"
        price = Decimal(str(value))
    elif isinstance(value, numbers.Real):
        # shortest repr keeps 0.1 as Decimal("0.1")
        price = Decimal(str(float(value)))
    else:
        raise InvalidInputError(f"{_where(index)} must be numeric, got {value!r}")

    if not price.is_finite():
        raise InvalidInputError(f"{_where(index)} must be finite, got {value!r}")
    return price


def validate_price(
    value,
    index: int | None = None,
    *,
    max_valid_price: Decimal = MAX_VALID_PRICE,
) -> Decimal:
    """Return ``value`` as a ``Decimal`` if ``0 < value < max_valid_price``.

    ``index`` is the minute the sample belongs to and only feeds the error
    message.
    """
    price = to_price(value, index)
    if price <= 0 or price >= max_valid_price:
        raise InvalidInputError(
            f"{_where(index)} must be greater than 0 and less than "
            f"{max_valid_price}, got {value!r}"
        )
    return price


# ──────────────────────────────────────────────────────────────────────────────
#  Whole series / settings
# ──────────────────────────────────────────────────────────────────────────────
def check_ceiling(max_valid_price) -> Decimal:
    """Validate a ``max_valid_price`` override."""
    ceiling = to_price(max_valid_price)
    if ceiling <= 0:
        raise InvalidInputError(f"max_valid_price must be positive, got {max_valid_price!r}")
    return ceiling


def check_series(prices) -> int:
    """Check the container itself and return its length.

    Element values are left alone; they are validated one by one while the
    series is scanned.
    """
    if prices is None:
        raise InvalidInputError("prices must be provided")
    # sets, dict views and generators have no minute order
    ordered = (
        isinstance(prices, pd.Series)
        or (isinstance(prices, np.ndarray) and prices.ndim == 1)
        or (
            isinstance(prices, Sequence)
            and not isinstance(prices, (str, bytes, bytearray, memoryview))
        )
    )
    if not ordered:
        raise InvalidInputError(
            f"prices must be an ordered one-dimensional sequence, got {type(prices).__name__}"
        )
    length = len(prices)

    if length < MIN_SERIES_LENGTH:
        raise InvalidInputError(
            f"prices must contain at least {MIN_SERIES_LENGTH} positive values, got {length}"
        )
    return length
