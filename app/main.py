"""
Elite Kutz Kiosk Notifier API

FastAPI application entry point that ties all components together.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings, validate_sms_settings
from app.api.routes import events, health, roster, webhooks
from app.core.roster import get_roster_store
from app.infra.sms import close_sms_client
from app.infra.staff_status import close_staff_status_client


def setup_logging() -> None:
    """Configure logging based on environment."""
    log_level = logging.DEBUG if settings.debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # === STARTUP ===
    setup_logging()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")

    health.set_start_time()
    validate_sms_settings(settings)

    if not settings.kiosk_api_key:
        logger.warning("KIOSK_API_KEY is not set - kiosk endpoints are unauthenticated")

    roster_snapshot = get_roster_store().snapshot()
    logger.info(
        f"Roster loaded: {len(roster_snapshot)} staff, "
        f"{len(roster_snapshot.busy())} busy"
    )

    logger.info(f"Webhook listening on :{settings.port}")

    yield

    # === SHUTDOWN ===
    logger.info("Shutting down application...")
    await close_sms_client()
    await close_staff_status_client()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Elite Kutz Kiosk Notifier",
    description="""
    SMS notifications for the Elite Kutz barbershop kiosk.

    ## Features
    - Kiosk lifecycle events fanned out to clients and barbers
    - Inbound STOP / START / HELP handling
    - Barber AVAILABLE / UNAVAILABLE status by text

    ## Authentication
    Kiosk endpoints under `/api` require the `X-API-Key` header.
    """,
    version="1.0.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle Pydantic validation errors."""
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "ok": False,
            "error": "Validation error",
            "detail": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the non-serializable ctx payloads."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


@app.exception_handler(Exception)
async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    # Don't expose internal errors in production
    detail = str(exc) if settings.is_development else "Internal server error"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "ok": False,
            "error": "Internal server error",
            "detail": detail,
        },
    )


@app.middleware("http")
async def request_timing_middleware(request: Request, call_next):
    """Log request duration in debug mode."""
    start_time = time.time()
    response = await call_next(request)

    if settings.debug:
        duration = time.time() - start_time
        logger.debug(
            f"{request.method} {request.url.path} "
            f"{response.status_code} in {duration:.3f}s"
        )
    return response


app.include_router(health.router)
app.include_router(events.router)
app.include_router(roster.router)
app.include_router(webhooks.router)


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Basic API information."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.app_env,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
