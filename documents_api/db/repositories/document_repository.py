from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from documents_api.db.gateway import DatabaseGateway
from documents_api.db.models import DOCUMENT_COLUMNS, documents

Row = Dict[str, Any]

SELECT_ALL = select(*DOCUMENT_COLUMNS).order_by(documents.c.id.asc())

SELECT_BY_ID = select(*DOCUMENT_COLUMNS).where(documents.c.id == bindparam("document_id"))

INSERT_DOCUMENT = (
    insert(documents)
    .values(
        content=bindparam("new_content"),
        docId=bindparam("new_doc_id"),
        userId=bindparam("new_user_id"),
    )
    .returning(*DOCUMENT_COLUMNS)
)

UPDATE_BY_ID = (
    update(documents)
    .where(documents.c.id == bindparam("document_id"))
    .values(
        content=bindparam("new_content"),
        docId=bindparam("new_doc_id"),
        userId=bindparam("new_user_id"),
    )
    .returning(*DOCUMENT_COLUMNS)
)

DELETE_BY_ID = (
    delete(documents)
    .where(documents.c.id == bindparam("document_id"))
    .returning(*DOCUMENT_COLUMNS)
)


class DocumentRepository:
    """Репозиторий документов: один запрос на операцию"""

    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    async def list_all(self) -> List[Row]:
        return await self.gateway.execute(SELECT_ALL)

    async def get_by_id(self, document_id: int) -> List[Row]:
        return await self.gateway.execute(SELECT_BY_ID, {"document_id": document_id})

    async def create(
        self,
        content: Optional[str],
        doc_id: Optional[str],
        user_id: Optional[str],
    ) -> List[Row]:
        return await self.gateway.execute(
            INSERT_DOCUMENT,
            {"new_content": content, "new_doc_id": doc_id, "new_user_id": user_id},
        )

    async def update(
        self,
        document_id: int,
        content: Optional[str],
        doc_id: Optional[str],
        user_id: Optional[str],
    ) -> List[Row]:
        return await self.gateway.execute(
            UPDATE_BY_ID,
            {
                "document_id": document_id,
                "new_content": content,
                "new_doc_id": doc_id,
                "new_user_id": user_id,
            },
        )

    async def delete(self, document_id: int) -> List[Row]:
        return await self.gateway.execute(DELETE_BY_ID, {"document_id": document_id})
