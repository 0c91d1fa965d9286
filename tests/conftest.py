"""Shared fixtures building marketplace ledger payloads."""

import pytest


ACCOUNT_ID = "76561198000000001"
OTHER_ID = "76561198000000002"


def _purchase_payload(
    asset_id,
    new_id=None,
    paid_amount=0,
    paid_fee=0,
    time_sold=1700000000,
    purchaser=ACCOUNT_ID,
    app_id=730,
    context_id=2,
    **extra,
) -> dict:
    asset = {"appid": app_id, "contextid": str(context_id), "id": asset_id}
    if new_id is not None:
        asset["new_id"] = new_id
    payload = {
        "steamid_purchaser": purchaser,
        "asset": asset,
        "paid_amount": paid_amount,
        "paid_fee": paid_fee,
        "currencyid": "2003",
        "time_sold": time_sold,
    }
    payload.update(extra)
    return payload


def _sale_payload(
    asset_id,
    received_amount=0,
    paid_amount=None,
    paid_fee=0,
    time_sold=1700086400,
    purchaser=OTHER_ID,
    app_id=730,
    context_id=2,
    **extra,
) -> dict:
    payload = _purchase_payload(
        asset_id,
        paid_amount=received_amount if paid_amount is None else paid_amount,
        paid_fee=paid_fee,
        time_sold=time_sold,
        purchaser=purchaser,
        app_id=app_id,
        context_id=context_id,
        **extra,
    )
    if received_amount is not None:
        payload["received_amount"] = received_amount
        payload["received_currencyid"] = "2003"
    return payload


def _catalog(*items) -> dict:
    """Build the nested app/context/asset catalog from flat tuples.

    Each item is (app_id, context_id, asset_id, name[, unowned_id]).
    """
    assets: dict = {}
    for item in items:
        app_id, context_id, asset_id, name = item[:4]
        metadata = {"id": asset_id, "market_hash_name": name}
        if len(item) > 4:
            metadata["unowned_id"] = item[4]
        assets.setdefault(str(app_id), {}).setdefault(str(context_id), {})[
            str(asset_id)
        ] = metadata
    return assets


@pytest.fixture
def account_id() -> str:
    return ACCOUNT_ID


@pytest.fixture
def other_id() -> str:
    return OTHER_ID


@pytest.fixture
def purchase():
    return _purchase_payload


@pytest.fixture
def sale():
    return _sale_payload


@pytest.fixture
def catalog():
    return _catalog


@pytest.fixture
def round_trip_ledger():
    """One completed pair, one uncompleted purchase, one received sale."""
    return {
        "purchases": {
            "p1": _purchase_payload("100", new_id="200", paid_amount=1000,
                                    paid_fee=150),
            "p2": _purchase_payload("300", new_id="400", paid_amount=500,
                                    paid_fee=75),
            "s1": _sale_payload("200", received_amount=1500,
                                paid_amount=1725),
            "s2": _sale_payload("900", received_amount=250,
                                paid_amount=288),
        },
        "assets": _catalog(
            (730, 2, "100", "AK-47 | Redline (Field-Tested)"),
            (730, 2, "200", "AK-47 | Redline (Field-Tested)", "100"),
            (730, 2, "300", "AWP | Asiimov (Battle-Scarred)"),
            (730, 2, "900", "Sticker | Crown (Foil)"),
        ),
    }
