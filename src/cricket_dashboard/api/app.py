"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import settings
from ..database import backend_name, create_tables
from ..errors import ApiError
from .router import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info(f"API ready on {backend_name()} database")
    yield


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code or ''}".rstrip())
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def handle_invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> rejected body: {exc.errors()}")
    error = ApiError(400, "Request body must be a valid JSON object", "INVALID_BODY")
    return JSONResponse(status_code=400, content=error.to_payload())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}")
    error = ApiError(500, "Internal server error", "INTERNAL_ERROR")
    return JSONResponse(status_code=500, content=error.to_payload())


def create_app() -> FastAPI:
    app = FastAPI(title=settings.api.title, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_invalid_request)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/health")
    def health():
        return {"status": "ok", "database": backend_name()}

    app.include_router(api_router)
    return app
