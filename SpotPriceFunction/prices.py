import asyncio
import json
import logging
from typing import Optional

import httpx
from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError

from .config import PRICE_AREA, RECORD_LIMIT, Settings, get_settings
from .errors import DecodeError, ParseError, UpstreamError
from .models import FrontendResponse, PriceDataResponse
from .tariffs import transform

logger = logging.getLogger(__name__)

router = APIRouter()


def spot_price_query():
    return {
        "limit": RECORD_LIMIT,
        "filter": json.dumps({"PriceArea": PRICE_AREA}, separators=(",", ":")),
    }


async def _get(client: Optional[httpx.AsyncClient], url: str, timeout: float) -> httpx.Response:
    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as own_client:
            return await own_client.get(url, params=spot_price_query())
    return await client.get(url, params=spot_price_query(), timeout=timeout)


async def fetch_spot_prices(client: Optional[httpx.AsyncClient] = None, settings: Optional[Settings] = None):
    """
    Fetch the most recent week of hourly spot prices, oldest first.

    request_timeout bounds the whole exchange, not just each connect or read.
    """
    settings = settings or get_settings()
    url = f"{settings.energidata_base_url}/Elspotprices"

    try:
        response = await asyncio.wait_for(_get(client, url, settings.request_timeout), settings.request_timeout)
        response.raise_for_status()
    except asyncio.TimeoutError as exc:
        logger.warning("Spot price request to %s timed out after %ss", url, settings.request_timeout)
        raise UpstreamError(f"Timed out fetching {url}") from exc
    except httpx.HTTPError as exc:
        logger.warning("Spot price request to %s failed: %s", url, exc)
        raise UpstreamError(f"Error fetching {url}: {exc}") from exc

    try:
        data = PriceDataResponse.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("Spot price response from %s could not be decoded: %s", url, exc)
        raise DecodeError(f"Unexpected response body from {url}") from exc

    logger.info("Fetched %d spot price records from %s", len(data.records), data.dataset)
    return data.records


# Route 1
@router.get("/", tags=["Strømpriser"], response_model=FrontendResponse, status_code=status.HTTP_200_OK)
async def get_spot_prices():
    try:
        records = await fetch_spot_prices()
        spot_prices = transform(records)
    except UpstreamError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error fetching spot prices from external API"
        )
    except DecodeError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Unexpected response from external API"
        )
    except ParseError as exc:
        logger.error("Could not transform spot prices: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not parse spot price data"
        )
    return FrontendResponse(spot_prices=spot_prices)
