"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a ledger snapshot or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_two_places(value: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_two_places"]
