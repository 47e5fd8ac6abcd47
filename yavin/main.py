"""
Main FastAPI application.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from yavin.api import pages
from yavin.api.v1 import api_router
from yavin.core.config import settings
from yavin.core.exceptions import YavinError
from yavin.db.init_db import init_db

# Configure logging BEFORE creating the app
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(levelname)s:\t%(name)s\t%(message)s',
    handlers=[
        logging.StreamHandler()  # Output to console
    ]
)
logging.getLogger("uvicorn").setLevel(logging.INFO)

logger = logging.getLogger(__name__)

VERSION = "0.2.0"

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Learn artificial intelligence with progress tracking, XP and badges",
    version=VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
)

cors_origins = settings.BACKEND_CORS_ORIGINS if settings.BACKEND_CORS_ORIGINS != "*" else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(YavinError)
async def yavin_exception_handler(request: Request, exc: YavinError):
    """
    Handle expected caller errors (validation, auth, conflicts).

    Args:
        request: Request object
        exc: Domain exception

    Returns:
        JSON response with error details
    """
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request body validation errors.

    Args:
        request: Request object
        exc: Validation exception

    Returns:
        JSON response with error details
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "detail": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle all unhandled exceptions.

    Args:
        request: Request object
        exc: Exception

    Returns:
        JSON response with a generic error message
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error", "code": "INTERNAL_ERROR"},
    )


# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """
    Run on application startup. Database and template problems are fatal.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} v{VERSION}")
    init_db()
    pages.get_renderer()
    logger.info(f"Documentation available at {settings.API_V1_PREFIX}/openapi.json and /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """
    Run on application shutdown.
    """
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {"success": True, "status": "healthy", "version": VERSION}


# Include routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)
app.include_router(pages.router)
