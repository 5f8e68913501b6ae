from .errors import InvalidInputError
from .prices import MAX_VALID_PRICE, MIN_SERIES_LENGTH, validate_price
from .profit import Spread, compute_max_profit, find_best_trade, iter_spreads

__all__ = [
    "InvalidInputError",
    "MAX_VALID_PRICE",
    "MIN_SERIES_LENGTH",
    "validate_price",
    "Spread",
    "iter_spreads",
    "compute_max_profit",
    "find_best_trade",
]
