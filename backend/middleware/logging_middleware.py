"""
Request / response logging middleware with a per-request id.
"""

import time
import uuid

from fastapi import Request
from loguru import logger

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    start = time.perf_counter()

    with logger.contextualize(request_id=request_id):
        logger.info(f"→ [{request_id}] {request.method} {request.url.path}")
        response = await call_next(request)
        elapsed = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            f"← [{request_id}] {request.method} {request.url.path} "
            f"[{response.status_code}] {elapsed}ms"
        )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
