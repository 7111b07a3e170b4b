"""Intake Service - FastAPI Application Entry Point

A small FastAPI service that validates contact submissions (name, email,
age, phone) sent as JSON or form data and echoes accepted records.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.models.responses import ErrorResponse
from app.routers import health, submit
from app.utils.body import BodyParseError
from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("intake")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info(
        "Starting Intake Service",
        extra={"environment": settings.environment, "port": settings.port},
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")

    yield

    # Shutdown
    logger.info("Shutting down Intake Service")


app = FastAPI(
    title="Intake Service",
    description="Validates contact submissions sent as JSON or form data",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.include_router(health.router)
app.include_router(submit.router)


@app.exception_handler(BodyParseError)
async def body_parse_error_handler(request: Request, exc: BodyParseError):
    """Reject bodies that declare a supported type but cannot be decoded."""
    logger.warning(
        f"Malformed request body: {exc}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            code="ERR_MALFORMED_BODY",
            error="Request body could not be parsed",
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Logs the error and returns a generic message.
    Never exposes internal error details to clients.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            code="ERR_INTERNAL",
            error="An unexpected error occurred. Please try again.",
        ).model_dump(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=not settings.is_production)
