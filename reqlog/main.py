"""FastAPI demo application with access logging installed."""

from __future__ import annotations

from fastapi import FastAPI

from reqlog.config import settings
from reqlog.logging_config import setup_logging
from reqlog.middleware.request_logging import RequestLoggingMiddleware
from reqlog.models import ServiceInfo
from reqlog.routes import health

# Configure logging before anything else
setup_logging()

app = FastAPI(
    title="reqlog demo",
    description="Sample service emitting one access-log line per request",
    version="0.1.0",
)

app.add_middleware(RequestLoggingMiddleware, format=settings.access_log_fields)

app.include_router(health.router)


@app.get("/", response_model=ServiceInfo)
async def root():
    return ServiceInfo(service="reqlog-demo", version="0.1.0", docs="/docs")


def start():
    """Entry point for running the server directly."""
    import uvicorn
    uvicorn.run(
        "reqlog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    start()
