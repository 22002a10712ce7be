"""
Middleware to log HTTP requests with structured fields.
The extra fields are picked up by the Datadog handler when it is enabled.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("org_chart.http")

SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs completion (or failure) of every request with method, path,
    status code and duration.
    """

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path

        # Health checks are too noisy
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.time()
        base_fields = {
            "http.method": method,
            "http.url": path,
            "http.url_details.query_string": str(request.query_params),
            "http.client_ip": request.client.host if request.client else "unknown",
            "http.request_id": request.headers.get("X-Request-ID", ""),
        }

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"{method} {path} 500 - {str(e)}",
                extra={
                    **base_fields,
                    "http.status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                    "error.type": type(e).__name__,
                    "event_type": "http_request_error",
                },
                exc_info=True
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"{method} {path} {response.status_code}",
            extra={
                **base_fields,
                "http.status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "event_type": "http_request_complete",
            }
        )
        return response
