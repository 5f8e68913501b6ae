import sys
from decimal import Decimal
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from stockprofit import MAX_VALID_PRICE, InvalidInputError, compute_max_profit, validate_price

DECIMAL_MAX = Decimal("79228162514264337593543950335")


@pytest.mark.parametrize(
    "prices",
    [
        None,
        [],
        [9],
        [-DECIMAL_MAX],
        [DECIMAL_MAX],
        [Decimal(-1)],
        [0, 1, 2],                      # prices cannot be 0
        [1, 2, -3],
        [1, MAX_VALID_PRICE],
        [1, DECIMAL_MAX],
        [1, float("nan")],
        [1, float("inf")],
        [Decimal("NaN"), 1],
        [Decimal("sNaN"), 1],
        [1, None],
        [True, 2],
        ["1", "2"],
        "12",
        {0: 1, 1: 2},
        pd.Series([5.0]),
        pd.Series([1.0, np.nan, 2.0]),
        pd.Series([1, pd.NA, 2], dtype="object"),
        pd.DataFrame({"close": [1, 2, 3]}),
        np.array([[1, 2], [3, 4]]),
        (p for p in [1, 2, 3]),
        {30, 10, 20},
        frozenset({5, 3, 9}),
        {0: 30, 1: 10, 2: 20}.values(),
        bytearray(b"\x05\x07"),
    ],
)
def test_invalid_input_raises(prices):
    with pytest.raises(InvalidInputError):
        compute_max_profit(prices)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        compute_max_profit([1])


def test_error_messages_name_the_problem():
    with pytest.raises(InvalidInputError, match="at least 2"):
        compute_max_profit([9])
    with pytest.raises(InvalidInputError, match="must be provided"):
        compute_max_profit(None)
    with pytest.raises(InvalidInputError, match="minute 0"):
        compute_max_profit([0, 1, 2])


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, Decimal(1)),
        (np.int64(3), Decimal(3)),
        (0.1, Decimal("0.1")),
        (np.float64(2.5), Decimal("2.5")),
        (Decimal("9999999.99"), Decimal("9999999.99")),
    ],
)
def test_validate_price_coerces_to_decimal(value, expected):
    price = validate_price(value)
    assert isinstance(price, Decimal)
    assert price == expected


@pytest.mark.parametrize("value", [0, -0.5, MAX_VALID_PRICE, 10_000_001, False, "3", object()])
def test_validate_price_rejects(value):
    with pytest.raises(InvalidInputError):
        validate_price(value, 4)


def test_validate_price_custom_ceiling():
    assert validate_price(99, max_valid_price=Decimal(100)) == 99
    with pytest.raises(InvalidInputError, match="less than 100"):
        validate_price(100, max_valid_price=Decimal(100))
