"""
Job Portal - Main Application

FastAPI backend with:
- MongoDB for users, jobs, companies and applications
- Cloudinary for avatar / resume hosting
- JWT session cookies

Run: uvicorn jobportal.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobportal.api.routes import api_router
from jobportal.core.config import get_settings
from jobportal.core.exceptions import JobPortalError
from jobportal.core.logging_config import configure_logging
from jobportal.db.mongodb import init_mongo_indexes, close_mongo_client, test_mongo_connection

settings = get_settings()


def error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "success": False})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    configure_logging()
    logger.info(f"Starting Job Portal ({settings.environment})...")

    try:
        init_mongo_indexes()
    except Exception as e:
        logger.warning(f"MongoDB index initialization failed: {e}")

    yield

    logger.info("Shutting down...")
    close_mongo_client()


# Create FastAPI app
app = FastAPI(
    title="Job Portal",
    description="""
    Job board backend.

    ## Features
    - **Users**: Register, cookie-based login, profile with avatar/resume upload
    - **Jobs**: Admins post jobs; everyone browses and searches
    - **Applications**: Students list the jobs they applied to
    - **Companies**: Company details for job pages
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS: the SPA sends the session cookie, so origins must be explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JobPortalError)
async def job_portal_error_handler(request: Request, exc: JobPortalError):
    """Every application error becomes {message, success: false}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_envelope(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_envelope(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} -> invalid request: {exc.errors()}")
    return error_envelope(status.HTTP_400_BAD_REQUEST, "Something is missing")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception on {request.method} {request.url.path}")
    return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
