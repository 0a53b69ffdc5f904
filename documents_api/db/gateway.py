import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from documents_api.core.db import get_db

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Любой отказ базы: нет соединения, нарушение ограничения, ошибка запроса"""


class DatabaseGateway:
    """Выполнение параметризованных запросов в рамках одной сессии"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(
        self,
        statement: Executable,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """Выполнение запроса; значения передаются драйверу как связанные параметры"""
        try:
            result = await self.session.execute(statement, dict(parameters or {}))
            rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
            await self.session.commit()
        except (SQLAlchemyError, OSError, OverflowError) as e:
            await self._rollback()
            raise DatabaseError(str(e)) from e
        logger.debug("Statement returned %d row(s)", len(rows))
        return rows

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except (SQLAlchemyError, OSError):
            logger.warning("Rollback failed after statement error", exc_info=True)


async def get_gateway(session: AsyncSession = Depends(get_db)) -> DatabaseGateway:
    return DatabaseGateway(session)
