"""
CatalogSync API
FastAPI + MongoDB backend for bulk editing a Squarespace catalog
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalogsync.config import settings
from catalogsync.database import connect_db, close_db
from catalogsync.exceptions import (
    CatalogSyncError,
    ConfigurationError,
    TransportError,
    UnsupportedFieldError,
    ValidationError
)
from catalogsync.routers import bulk_edit_router, products_router, settings_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(levelname)s:     %(name)s: %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Handles startup and shutdown events
    """
    logger.info("Starting CatalogSync...")
    await connect_db()

    yield

    logger.info("Shutting down CatalogSync...")
    await close_db()


app = FastAPI(
    title="CatalogSync API",
    description="Bulk edit visibility, prices, tags and categories of a Squarespace catalog",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogSyncError)
async def catalogsync_error_handler(request: Request, exc: CatalogSyncError):
    """Map engine errors to HTTP responses"""
    if isinstance(exc, ConfigurationError):
        # The console shows "connect your account" for this one
        status_code = status.HTTP_412_PRECONDITION_FAILED
    elif isinstance(exc, (UnsupportedFieldError, ValidationError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, TransportError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__}
    )


app.include_router(settings_router.router, prefix="/api/settings", tags=["Settings"])
app.include_router(products_router.router, prefix="/api", tags=["Products"])
app.include_router(bulk_edit_router.router, prefix="/api/products/bulk", tags=["Bulk Edit"])


@app.get("/")
async def root():
    return {
        "service": "CatalogSync API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "environment": settings.ENVIRONMENT}
