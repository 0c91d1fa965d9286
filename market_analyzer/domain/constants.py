"""Domain constants for ledger reconciliation."""

ROLE_PURCHASE = "purchase"
ROLE_SALE = "sale"

STATUS_COMPLETED = "completed"
STATUS_UNCOMPLETED = "uncompleted"
STATUS_RECEIVED = "received"

MATCH_TYPE_PURCHASED = "purchased"
MATCH_TYPE_OTHER_SOURCE = "other_source"

UNKNOWN_ITEM = "Unknown Item"

ZERO_PERCENT = "0%"


__all__ = [
    "ROLE_PURCHASE",
    "ROLE_SALE",
    "STATUS_COMPLETED",
    "STATUS_UNCOMPLETED",
    "STATUS_RECEIVED",
    "MATCH_TYPE_PURCHASED",
    "MATCH_TYPE_OTHER_SOURCE",
    "UNKNOWN_ITEM",
    "ZERO_PERCENT",
]
