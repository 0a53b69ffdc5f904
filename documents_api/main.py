import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from documents_api import __version__
from documents_api.api.http.documents import router as documents_router
from documents_api.api.http.health import router as health_router
from documents_api.api.http.responses import error_response
from documents_api.config import get_settings
from documents_api.core.db import create_schema, dispose_engine, get_engine
from documents_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    if settings.CREATE_SCHEMA:
        await create_schema(get_engine())
        logger.info("Schema created")
    yield
    await dispose_engine()


app = FastAPI(
    title="Documents API",
    description="CRUD API for documents",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(documents_router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(422, "Invalid request body")


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Documents API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


def run() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info("Documents API listening at http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
