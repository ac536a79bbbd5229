import logging
import time
import uuid

import fastapi
from fastapi.responses import PlainTextResponse
from .prices import router as prices_router

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, no-transform, must-revalidate, private, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}

app = fastapi.FastAPI(
    title="Spot Price API",
    description="Dette API udstiller timepriser på strøm i DK2 inkl. afgifter, tariffer og moms."
)


@app.middleware("http")
async def request_context(request: fastapi.Request, call_next):
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    client_ip = request.headers.get("X-Forwarded-For", "").split(",")[0].strip() or (
        request.client.host if request.client else "-"
    )
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error serving %s %s request_id=%s", request.method, request.url.path, request_id)
        response = PlainTextResponse("Internal Server Error", status_code=500)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        '%s "%s %s" %d %.1fms request_id=%s',
        client_ip, request.method, request.url.path, response.status_code, elapsed_ms, request_id,
    )
    response.headers["X-Request-ID"] = request_id
    response.headers.update(NO_CACHE_HEADERS)
    return response


# Include the prices router
app.include_router(prices_router)
