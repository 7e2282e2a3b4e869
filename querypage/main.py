import time
import uuid

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from querypage.core.config import get_settings
from querypage.core.exceptions import (
    AppError,
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)
from querypage.core.logging import bind_request_id, configure_logging, get_logger

log = get_logger(__name__)


def create_app() -> FastAPI:
    """App with request-id logging and the error envelope; mount paged routes on it."""
    settings = get_settings()
    configure_logging(debug=settings.debug)

    app = FastAPI(title="querypage", version="0.1.0")

    @app.middleware("http")
    async def request_id_middleware(request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        bind_request_id(request_id)
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        log.info(
            "request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.get("/health")
    async def health():
        """Health check for load balancers and monitoring."""
        return {"status": "ok"}

    return app
