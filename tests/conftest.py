"""Shared fixtures for the spot price tests."""

from datetime import datetime, timedelta

import pytest

from SpotPriceFunction.models import HourlyPrice


def make_record(hour_utc: str, spot_price_dkk: float = 500.0) -> HourlyPrice:
    return HourlyPrice(
        HourUTC=hour_utc,
        HourDK=hour_utc,
        PriceArea="DK2",
        SpotPriceDKK=spot_price_dkk,
        SpotPriceEUR=spot_price_dkk / 7.46,
    )


def make_payload(records):
    return {
        "total": 250000,
        "filters": '{"PriceArea":"DK2"}',
        "limit": len(records),
        "dataset": "Elspotprices",
        "records": [record.model_dump() for record in records],
    }


@pytest.fixture
def week_of_records():
    """168 hourly records, oldest first, as the dataset API returns them."""
    start = datetime(2024, 3, 25, 0, 0, 0)
    return [
        make_record((start + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M:%S"), 300.0 + i)
        for i in range(168)
    ]
