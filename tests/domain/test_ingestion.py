"""Tests for ledger and holdings ingestion."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import HoldingItem, LedgerSnapshot
from market_analyzer.domain.services.ingestion import (
    build_asset_catalog,
    build_holding_item,
    build_holdings,
    build_ledger_entry,
    build_ledger_snapshot,
)


def test_build_ledger_entry_normalizes_fields(purchase, account_id) -> None:
    """Entries should carry string ids and Decimal amounts."""
    entry = build_ledger_entry(
        17,
        purchase(123, new_id=456, paid_amount=250, paid_fee="37"),
    )

    assert entry.record_id == "17"
    assert entry.purchaser_id == account_id
    assert entry.asset.app_id == "730"
    assert entry.asset.context_id == "2"
    assert entry.asset.asset_id == "123"
    assert entry.asset.new_asset_id == "456"
    assert entry.paid_amount == Decimal("250")
    assert entry.paid_fee == Decimal("37")
    assert entry.currency_id == "2003"
    assert entry.time_sold == 1700000000
    assert entry.received_amount is None


def test_build_ledger_entry_keeps_received_amount(sale) -> None:
    """Sales should keep their received amount and currency."""
    entry = build_ledger_entry("s1", sale("9", received_amount=88))

    assert entry.received_amount == Decimal("88")
    assert entry.received_currency_id == "2003"


@pytest.mark.parametrize("payload", [None, "entry", 5])
def test_build_ledger_entry_rejects_non_mapping(payload) -> None:
    """Entries must be mappings."""
    with pytest.raises(InvalidInputError):
        build_ledger_entry("x", payload)


def test_build_ledger_entry_rejects_non_mapping_asset() -> None:
    """The nested asset must be a mapping too."""
    with pytest.raises(InvalidInputError):
        build_ledger_entry("x", {"asset": ["730", "2", "1"]})


@pytest.mark.parametrize(
    "field, value",
    [
        ("paid_amount", "abc"),
        ("paid_amount", "NaN"),
        ("paid_fee", "Infinity"),
        ("paid_fee", [1]),
    ],
)
def test_build_ledger_entry_rejects_unreadable_amounts(
    purchase, field, value
) -> None:
    """Non-numeric or non-finite amounts should name the bad record."""
    payload = purchase("1", **{field: value})

    with pytest.raises(InvalidInputError, match="'p7'"):
        build_ledger_entry("p7", payload)


@pytest.mark.parametrize("value", ["abc", "-Infinity", "nan"])
def test_build_ledger_entry_rejects_unreadable_received_amount(
    sale, value
) -> None:
    """Sale proceeds go through the same amount checks."""
    with pytest.raises(InvalidInputError, match="received_amount"):
        build_ledger_entry(
            "s1", sale("9", received_amount=value, paid_amount=5)
        )


@pytest.mark.parametrize("value", ["soon", 1700000000000, "1e30", float("inf")])
def test_build_ledger_entry_rejects_unreadable_time_sold(
    purchase, value
) -> None:
    """Sale times must be numeric second timestamps within the date range."""
    with pytest.raises(InvalidInputError, match="time_sold"):
        build_ledger_entry("p1", purchase("1", time_sold=value))


def test_build_asset_catalog_flattens_nested_mapping(catalog) -> None:
    """Catalog keys should be (app id, context id, asset id) strings."""
    assets = catalog(
        (730, 2, "11", "Prisma Case"),
        (440, 2, "12", "Mann Co. Key", "10"),
    )
    assets["730"]["2"]["11"]["icon_url"] = "icon-11"

    result = build_asset_catalog(assets)

    assert list(result) == [("730", "2", "11"), ("440", "2", "12")]
    assert result[("730", "2", "11")].icon_url == "icon-11"
    assert result[("440", "2", "12")].unowned_id == "10"


def test_build_asset_catalog_accepts_empty_arrays() -> None:
    """Empty JSON arrays stand in for empty objects at every level."""
    assert dict(build_asset_catalog([])) == {}
    assert dict(build_asset_catalog({"730": []})) == {}
    assert dict(build_asset_catalog({"730": {"2": []}})) == {}


def test_build_asset_catalog_rejects_non_empty_list() -> None:
    """A non-empty list cannot be read as a catalog."""
    with pytest.raises(InvalidInputError):
        build_asset_catalog([{"730": {}}])


def test_build_ledger_snapshot_warns_without_assets(purchase) -> None:
    """A ledger without a catalog should parse with a warning."""
    logger = MagicMock()

    snapshot = build_ledger_snapshot(
        {"purchases": {"p1": purchase("A")}},
        logger,
    )

    assert isinstance(snapshot, LedgerSnapshot)
    assert len(snapshot.entries) == 1
    assert dict(snapshot.assets) == {}
    logger.warning.assert_called_once()


def test_build_ledger_snapshot_returns_snapshot_unchanged() -> None:
    """Already built snapshots pass through."""
    snapshot = LedgerSnapshot(entries=())

    assert build_ledger_snapshot(snapshot) is snapshot


def test_snapshot_is_immutable(purchase) -> None:
    """The snapshot catalog should not be writable."""
    snapshot = build_ledger_snapshot({"purchases": {"p1": purchase("A")}})

    with pytest.raises(TypeError):
        snapshot.assets[("730", "2", "A")] = None


def test_build_holding_item_reads_alternate_keys() -> None:
    """Items may name their id assetid, asset_id or id."""
    assert build_holding_item({"assetid": 1}).asset_id == "1"
    assert build_holding_item({"asset_id": "2"}).asset_id == "2"
    assert build_holding_item({"id": 3, "appId": 730}).app_id == "730"
    assert build_holding_item({"market_hash_name": "x"}) is None


def test_build_holdings_skips_items_without_id() -> None:
    """Items lacking an asset id are skipped with a warning."""
    logger = MagicMock()
    held = HoldingItem(asset_id="9")

    result = build_holdings(
        [{"assetid": "1", "type": "Container"}, {}, held],
        logger,
    )

    assert [item.asset_id for item in result] == ["1", "9"]
    assert result[0].item_type == "Container"
    assert result[1] is held
    logger.warning.assert_called_once()


def test_build_holdings_rejects_non_mapping_items() -> None:
    """Every holdings entry must be a mapping."""
    with pytest.raises(InvalidInputError):
        build_holdings(["1", "2"])
