"""Runtime settings, read from the environment (and a .env file if present)."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Fixed request target: one price area, the last week of hourly records.
PRICE_AREA = "DK2"
RECORD_LIMIT = 168
LOCAL_TIMEZONE = "Europe/Copenhagen"


@dataclass(frozen=True)
class Settings:
    energidata_base_url: str = "https://api.energidataservice.dk/dataset"
    request_timeout: float = 10.0
    port: int = 8080
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings(
        energidata_base_url=os.getenv("ENERGIDATA_BASE_URL", Settings.energidata_base_url).rstrip("/"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", Settings.request_timeout)),
        port=int(os.getenv("PORT", Settings.port)),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=settings.log_level,
    )
