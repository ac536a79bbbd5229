from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# Upstream records keep the dataset's own field names.
class HourlyPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    HourUTC: str
    HourDK: Optional[str] = None
    PriceArea: str
    SpotPriceDKK: float
    SpotPriceEUR: Optional[float] = None


class PriceDataResponse(BaseModel):
    total: int
    filters: str
    limit: int
    dataset: str
    records: List[HourlyPrice]


class FrontendHourlyPrice(BaseModel):
    start_time: str
    price: str


class FrontendResponse(BaseModel):
    spot_prices: List[FrontendHourlyPrice]
