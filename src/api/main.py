"""FastAPI application entry point."""

import logging
import sqlite3
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies import get_data_paths
from api.logging import RequestLog, get_client_ip, log_request
from api.models.responses import ErrorResponse
from api.routes import (
    breaks_router,
    files_router,
    guides_router,
    health_router,
    software_router,
    tasks_router,
)
from core.config import API_DEBUG, API_VERSION, REQUEST_LOG_DB, STATIC_DIR
from core.errors import ErrorCodes, PortalError, UpstreamError

logging.basicConfig(
    level=logging.DEBUG if API_DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup: make sure the data directories exist
    paths = get_data_paths()
    paths.ensure_dirs()
    logger.info("Portal data root: %s", paths.root)

    yield


app = FastAPI(
    title="Techpedia Portal API",
    description="Guides wiki, software catalog, task log and break scheduler",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# None disables request logging
app.state.request_log_db = REQUEST_LOG_DB

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _error_body(error: str, code: str, details: list[str] | None = None, upstream=None) -> dict:
    body = ErrorResponse(error=error, code=code, details=details or [], upstream=upstream)
    return body.model_dump(exclude_none=True)


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    """Translate service errors into the standard error body."""
    request.state.error_code = exc.code
    request.state.error_message = exc.message
    upstream = exc.upstream if isinstance(exc, UpstreamError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.code, exc.details, upstream),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Flatten dict details into the standard error body."""
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        code = ErrorCodes.NOT_FOUND if exc.status_code == 404 else ErrorCodes.INVALID_REQUEST
        content = _error_body(str(exc.detail), code)
    request.state.error_code = content.get("code")
    request.state.error_message = content.get("error")
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", ErrorCodes.INTERNAL_ERROR),
    )


@app.middleware("http")
async def record_api_request(request: Request, call_next):
    """Write one request-log row per /api call."""
    db_path = request.app.state.request_log_db
    if db_path is None or not request.url.path.startswith("/api"):
        return await call_next(request)

    start_time = time.time()
    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        query=request.url.query or None,
    )

    response = await call_next(request)

    request_log.status_code = response.status_code
    request_log.error_code = getattr(request.state, "error_code", None)
    request_log.error_message = getattr(request.state, "error_message", None)
    request_log.processing_time_ms = int((time.time() - start_time) * 1000)
    try:
        log_request(request_log, db_path)
    except (sqlite3.Error, OSError) as e:
        # Don't fail the request if logging fails
        logger.warning("Request log write failed: %s", e)
    return response


# Include routers
app.include_router(health_router)
app.include_router(guides_router)
app.include_router(software_router)
app.include_router(files_router)
app.include_router(tasks_router)
app.include_router(breaks_router)

# Static site, mounted last so API routes win
app.mount(
    "/downloads",
    StaticFiles(directory=get_data_paths().downloads_dir, check_dir=False),
    name="downloads",
)
if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
else:
    logger.info("Static directory %s not found; serving API only", STATIC_DIR)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
