import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .routes.extraction import build_extraction_router
from .services.extraction_service import ExtractionService
from .services.extractors import get_extractor
from .utils.errors import ExtractionServiceError
from .utils.logging import logger


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the extraction application from an explicit configuration."""
    app_settings = app_settings or settings
    logger.configure(app_settings.LOG_LEVEL, app_settings.LOG_DIR)

    extractor = get_extractor(app_settings.EXTRACTION_STRATEGY)
    service = ExtractionService(app_settings, extractor)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.log_step("starting_word_extraction_service", {
            "host": app_settings.APP_HOST,
            "port": app_settings.APP_PORT,
            "debug": app_settings.DEBUG,
            "python_version": sys.version,
            "strategy": extractor.name,
            "max_upload_size_bytes": app_settings.max_upload_size_bytes
        })

        yield

        logger.log_step("word_extraction_service_shutdown")

    app = FastAPI(
        title=app_settings.SERVICE_NAME,
        description="Extracts the text content of uploaded Word documents.",
        version=app_settings.SERVICE_VERSION,
        lifespan=lifespan
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.log_step("request_completed", {
            "method": request.method,
            "url": str(request.url),
            "status_code": response.status_code,
            "process_time": process_time
        })

        return response

    @app.exception_handler(ExtractionServiceError)
    async def extraction_error_handler(request: Request, exc: ExtractionServiceError):
        logger.log_error("extraction_request_failed", {
            "method": request.method,
            "url": str(request.url),
            "status_code": exc.status_code,
            "error_class": type(exc).__name__,
            "error": exc.message
        })
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.log_error("unhandled_exception", {
            "method": request.method,
            "url": str(request.url),
            "error": str(exc)
        })
        return PlainTextResponse("Internal server error", status_code=500)

    app.include_router(build_extraction_router(app_settings, service))
    return app


app = create_app()
