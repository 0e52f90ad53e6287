"""
Main FastAPI application entry point.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fleet_api import database
from fleet_api.config import get_settings
from fleet_api.exceptions import FleetError, StorageUnavailableError
from fleet_api.logging_config import configure_logging
from fleet_api.routers import admin, alerts, dashboard, maintenance, vehicles
from fleet_api.seed import seed_database

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    configure_logging(settings)
    logger.info("Starting Fleet Management API")
    await database.init_db(settings)
    logger.info("Database initialized")

    if settings.seed_on_startup:
        async with database.async_session_maker() as session:
            await seed_database(
                session,
                vehicles=settings.seed_vehicle_count,
                maintenance=settings.seed_maintenance_count,
                alerts=settings.seed_alert_count,
            )
        logger.info("Database seeding completed")

    logger.info("API available at: %s", settings.api_prefix)

    yield

    # Shutdown
    logger.info("Shutting down Fleet Management API")
    await database.close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Fleet Management API

    Track fleet vehicles, their maintenance history and open service alerts.

    ### Entities:
    * **Vehicles**: Fleet vehicles identified by VIN
    * **Maintenance**: Service history with costs
    * **Alerts**: Inspections, recalls and overdue maintenance
    * **Dashboard**: Fleet summary statistics

    No authentication is applied; deploy behind an authenticating gateway.
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.exception(
            "HTTP %s %s failed after %.1f ms", request.method, request.url.path, elapsed_ms
        )
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "HTTP %s %s responded %s in %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "error": exc.error},
    )


@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Invalid input is a plain bad request
    logger.warning("Validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(vehicles.router, prefix=settings.api_prefix)
app.include_router(maintenance.router, prefix=settings.api_prefix)
app.include_router(alerts.router, prefix=settings.api_prefix)
app.include_router(dashboard.router, prefix=settings.api_prefix)
app.include_router(admin.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to Fleet Management API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fleet_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
