"""Consumer price calculation for hourly spot prices.

A raw spot price (DKK/MWh, ex. taxes and fees) becomes a consumer price in
DKK/kWh by adding the state electricity tax ("elafgift"), the supplier fee
and the grid tariff for the hour, and finally VAT. Grid tariffs follow the
Cerius schedule: the same hour brackets all year, with separate summer and
winter rates. All amounts are in DKK/kWh.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Tuple
from zoneinfo import ZoneInfo

from .config import LOCAL_TIMEZONE
from .errors import ParseError
from .models import FrontendHourlyPrice, HourlyPrice

HOUR_UTC_FORMAT = "%Y-%m-%dT%H:%M:%S"
# strptime alone accepts unpadded fields such as "2024-6-5T1:0:0"
HOUR_UTC_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII)

COPENHAGEN = ZoneInfo(LOCAL_TIMEZONE)


@dataclass(frozen=True)
class TariffRates:
    low: float
    high: float
    peak: float

    def rate(self, bracket: str) -> float:
        return getattr(self, bracket)


@dataclass(frozen=True)
class TariffSchedule:
    state_tariff: float = 0.7610
    # EWII "Grøn indkøbspris": 3.75 øre fixed hourly fee plus 6 øre for green power
    supplier_fee: float = 0.0975
    vat_rate: float = 0.25
    # Inclusive month range (April to September)
    summer_months: Tuple[int, int] = (4, 9)
    summer: TariffRates = TariffRates(low=0.1126, high=0.1689, peak=0.4391)
    winter: TariffRates = TariffRates(low=0.1126, high=0.3378, peak=1.0133)
    # (start_hour, end_hour, bracket), end exclusive
    brackets: Tuple[Tuple[int, int, str], ...] = (
        (0, 6, "low"),
        (6, 17, "high"),
        (17, 21, "peak"),
        (21, 24, "high"),
    )

    def season_rates(self, month: int) -> TariffRates:
        first, last = self.summer_months
        if first <= month <= last:
            return self.summer
        return self.winter

    def bracket_for(self, hour: int) -> str:
        for start, end, bracket in self.brackets:
            if start <= hour < end:
                return bracket
        raise ValueError(f"Hour {hour} is outside the tariff schedule")

    def consumer_price(self, spot_price_dkk_mwh: float, hour_utc: datetime) -> float:
        """Final consumer price in DKK/kWh for one hour, VAT included."""
        price = spot_price_dkk_mwh / 1000
        price += self.state_tariff
        price += self.supplier_fee
        rates = self.season_rates(hour_utc.month)
        price += rates.rate(self.bracket_for(hour_utc.hour))
        return price * (1 + self.vat_rate)


DEFAULT_SCHEDULE = TariffSchedule()


def parse_hour_utc(value: str) -> datetime:
    if not isinstance(value, str) or not HOUR_UTC_PATTERN.fullmatch(value):
        raise ParseError(f"Invalid HourUTC timestamp: {value!r}")
    try:
        parsed = datetime.strptime(value, HOUR_UTC_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Invalid HourUTC timestamp: {value!r}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def format_price(price: float) -> str:
    return f"{price:f}"


def transform(
    records: Iterable[HourlyPrice],
    local_tz: ZoneInfo = COPENHAGEN,
    schedule: TariffSchedule = DEFAULT_SCHEDULE,
) -> List[FrontendHourlyPrice]:
    """
    Turn raw upstream records into frontend prices, newest first.

    Records are expected oldest first, as the dataset API delivers them.
    A single malformed timestamp raises ParseError for the whole batch.
    """
    prices = []
    for record in records:
        hour_utc = parse_hour_utc(record.HourUTC)
        price = schedule.consumer_price(record.SpotPriceDKK, hour_utc)
        prices.append(FrontendHourlyPrice(
            start_time=hour_utc.astimezone(local_tz).isoformat(),
            price=format_price(price),
        ))
    prices.reverse()
    return prices

