from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.gzip import GZipMiddleware
from datetime import datetime, timezone
import logging

from api.org_chart import org_chart_router
from middleware.request_logging_middleware import RequestLoggingMiddleware
from settings.config import get_settings
from settings.datadog_logger import DatadogLogger

description = """
#### Org Chart APIs:
   Synthetic org charts for stress-testing grid UIs.
"""

settings = get_settings()

org_chart_app = FastAPI(
    title="Org Chart",
    description=description,
    version="0.1.0",
    docs_url="/docs/org-chart",
)


@org_chart_app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "failure",
            "data": None,
            "errors": [exc.detail]
        }
    )

org_chart_app.add_middleware(GZipMiddleware, minimum_size=1000)
org_chart_app.add_middleware(RequestLoggingMiddleware)

org_chart_app.include_router(org_chart_router)


@org_chart_app.get('/')
def read_root():
    """
    Root endpoint to check if the Org Chart API is running.
    """
    return {"message": "Org Chart API is running successfully!"}


@org_chart_app.get('/health')
def health_check():
    """
    Lightweight health check endpoint for Kubernetes probes.
    """
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


def configure_logging():
    """Set up root logging and attach the Datadog handler when a key is configured."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    if not root_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(settings.log_format))
        root_logger.addHandler(stream_handler)

    if settings.datadog_api_key and not any(isinstance(h, DatadogLogger) for h in root_logger.handlers):
        dd_handler = DatadogLogger(
            service=settings.service_name,
            api_key=settings.datadog_api_key,
            env=settings.environment,
            include_loggers=settings.datadog_include_loggers,
        )
        dd_handler.setLevel(logging.INFO)
        root_logger.addHandler(dd_handler)

        # Ensure uvicorn.access logs propagate to root logger (no direct handler)
        uvicorn_access_logger = logging.getLogger("uvicorn.access")
        uvicorn_access_logger.setLevel(logging.INFO)
        uvicorn_access_logger.propagate = True
        root_logger.info("Datadog root logger initialized")


configure_logging()
