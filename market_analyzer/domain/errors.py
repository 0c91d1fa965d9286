"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when a required collection is missing or malformed."""


__all__ = ["InvalidInputError"]
