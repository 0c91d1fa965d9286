"""Domain normalization helpers."""

from datetime import datetime, timezone
from decimal import Decimal

from market_analyzer.domain.constants import ZERO_PERCENT
from market_analyzer.utils.decimal_utils import round_two_places


def normalize_identifier(value) -> str | None:
    """Normalize a ledger identifier to its canonical string form.

    Args:
        value: Raw identifier (int or str) from a snapshot.

    Returns:
        str | None: Stripped string value, or None when empty.
    """
    if value is None or isinstance(value, bool):
        return None
    cleaned = str(value).strip()
    return cleaned or None


def normalize_timestamp(value) -> int | None:
    """Normalize a unix timestamp to an int.

    Args:
        value: Raw timestamp (int, float or numeric string).

    Returns:
        int | None: Seconds since the epoch, or None when absent.

    Raises:
        ValueError: If the value is not numeric or not a representable
            date (for example a millisecond timestamp).
    """
    if value is None or value == "":
        return None
    try:
        seconds = int(float(value))
        datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid timestamp {value!r}") from exc
    return seconds


def timestamp_to_iso(timestamp: int | None) -> str | None:
    """Return the UTC ISO-8601 representation of a unix timestamp."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


def compute_percent(part: Decimal, whole: Decimal) -> Decimal:
    """Return part / whole * 100 rounded to two places, 0 for a zero whole."""
    if not whole:
        return Decimal("0")
    return round_two_places(part / whole * Decimal("100"))


def format_share(count: int, total: int) -> str:
    """Format count / total as a two-decimal percentage string.

    Args:
        count: Number of records in the share.
        total: Number of records overall.

    Returns:
        str: "12.50%" style string, or "0%" when total is zero.
    """
    if not total:
        return ZERO_PERCENT
    share = compute_percent(Decimal(count), Decimal(total))
    return f"{share:.2f}%"


__all__ = [
    "normalize_identifier",
    "normalize_timestamp",
    "timestamp_to_iso",
    "compute_percent",
    "format_share",
]
