import time

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from cep_relay.api.health import health_router
from cep_relay.exceptions.base import CepRelayError

logger = structlog.get_logger(__name__)


def configure_app(app: FastAPI, service_name: str) -> FastAPI:
    """
    Attach the request logging middleware, error handlers and health route
    shared by both services.

    Errors are returned as ``text/plain`` bodies holding the short message of
    the raised CepRelayError; anything else becomes 500 "internal error".
    """
    app.state.service_name = service_name

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            service=service_name,
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                service=service_name,
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                service=service_name,
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    @app.exception_handler(CepRelayError)
    async def cep_relay_exception_handler(request: Request, exc: CepRelayError):
        """Map domain errors to their fixed status and message."""
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "Request failed",
            service=service_name,
            method=request.method,
            url=str(request.url),
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            error=str(exc),
        )

        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            service=service_name,
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return PlainTextResponse(
            "internal error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    app.include_router(health_router)
    return app
