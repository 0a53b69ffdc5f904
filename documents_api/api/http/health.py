import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import text

from fastapi.responses import JSONResponse
from documents_api.db.gateway import DatabaseError, DatabaseGateway, get_gateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(gateway: DatabaseGateway = Depends(get_gateway)):
    """Проверка доступности базы данных"""
    try:
        await gateway.execute(text("SELECT 1"))
    except DatabaseError:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ok"}
