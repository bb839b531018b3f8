"""
FastAPI application factory for the FlowBot API.

Exposes the flowchart generation pipeline to the canvas UI with
middleware, error handling and monitoring.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..shared import get_logger, get_metrics, setup_logging, get_settings
from .models import APIResponse, ErrorResponse, utc_timestamp
from .routers import flowcharts, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = get_logger(__name__)

    logger.info("Starting FlowBot API...")
    setup_logging()

    settings = get_settings()
    logger.info(f"Loaded configuration: {settings.app_name} {settings.app_version}")
    for provider, status in settings.provider_status.items():
        logger.info(f"Provider {provider}: {status}")

    yield

    logger.info("Shutting down FlowBot API...")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    settings = get_settings()

    app = FastAPI(
        title="FlowBot API",
        description="""
        Turns natural-language descriptions into flowcharts through a chain
        of text-generation providers with a local rule-based fallback.
        """,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        get_metrics().record_api_request(
            endpoint=request.url.path,
            method=request.method,
            duration_seconds=process_time,
            status_code=response.status_code
        )

        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger = get_logger(__name__)
        logger.error(f"Unhandled exception in {request.method} {request.url}: {exc}")

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=type(exc).__name__,
                message="Internal server error",
                timestamp=utc_timestamp()
            ).model_dump()
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error="HTTPException",
                message=str(exc.detail),
                timestamp=utc_timestamp()
            ).model_dump()
        )

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(flowcharts.router, prefix="/api", tags=["Flowcharts"])

    @app.get("/", response_model=APIResponse)
    async def root():
        """Root endpoint with API information."""
        return APIResponse(
            success=True,
            data={
                "name": settings.app_name,
                "version": settings.app_version,
                "docs": "/docs",
                "health": "/api/health",
                "generate": "/api/generate",
                "diagram_types": ["roadmap", "org-chart", "process", "mind-map"],
            },
            message="FlowBot API is running",
            timestamp=utc_timestamp()
        )

    return app
