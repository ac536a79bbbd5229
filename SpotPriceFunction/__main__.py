import uvicorn

from . import app
from .config import configure_logging, get_settings


def main():
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
