"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chunkwise.config.logging import configure_logging, get_logger
from chunkwise.config.settings import get_settings
from chunkwise.config.splitting.static import get_active_profile_name, load_splitter_profiles
from chunkwise.controllers.routes.split import router as split_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and profile validation, so a broken static.json fails fast."""
    settings = get_settings()
    configure_logging()
    profiles = load_splitter_profiles()
    logger.info(
        "Application starting",
        extra={"app_name": settings.app_name, "environment": settings.environment, "profiles": sorted(profiles)},
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Chunkwise",
    description="Split documents into bounded, overlapping chunks for retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.get("/profiles")
async def profiles() -> dict[str, Any]:
    """List the configured splitter profiles and the active one."""
    return {
        "active": get_active_profile_name(),
        "profiles": {name: cfg.model_dump(mode="json") for name, cfg in load_splitter_profiles().items()},
    }


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: do not leak stack traces or internal details to the client."""
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
