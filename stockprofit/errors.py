__all__ = ["InvalidInputError"]


class InvalidInputError(ValueError):
    """Raised when a price series cannot be priced (absent, too short, or out of range)."""
