"""
Last-resort handler: any exception escaping a route becomes a logged JSON 500.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

INTERNAL_ERROR = "Internal server error"


async def global_exception_handler(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        error_type = type(exc).__name__
        logger.exception(f"Unhandled {error_type} on {request.method} {request.url.path}")
        body = {"detail": INTERNAL_ERROR, "type": error_type, "path": request.url.path}
        return JSONResponse(status_code=500, content=body)
