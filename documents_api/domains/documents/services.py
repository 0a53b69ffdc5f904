import logging

from documents_api.db.gateway import DatabaseError, DatabaseGateway
from documents_api.db.repositories.document_repository import DocumentRepository
from documents_api.domains.documents.entities import (
    InfrastructureFailure,
    NotFound,
    Outcome,
    Success,
    parse_document_id,
)
from documents_api.domains.documents.schemas import DocumentBody

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, gateway: DatabaseGateway):
        self.document_repository = DocumentRepository(gateway)

    async def list_documents(self) -> Outcome:
        """Все документы по возрастанию id"""
        try:
            rows = await self.document_repository.list_all()
        except DatabaseError as e:
            return self._failure("list documents", e)
        return Success(rows)

    async def get_document(self, raw_id: str) -> Outcome:
        """Получение документа по id"""
        document_id = parse_document_id(raw_id)
        if document_id is None:
            return NotFound()
        try:
            rows = await self.document_repository.get_by_id(document_id)
        except DatabaseError as e:
            return self._failure("get document", e)
        return self._single(rows)

    async def create_document(self, data: DocumentBody) -> Outcome:
        """Создание нового документа"""
        try:
            rows = await self.document_repository.create(data.content, data.doc_id, data.user_id)
        except DatabaseError as e:
            return self._failure("create document", e)
        logger.info("Created document %s", rows[0]["id"] if rows else None)
        return Success(rows)

    async def update_document(self, raw_id: str, data: DocumentBody) -> Outcome:
        """Полная перезапись content, docId и userId"""
        document_id = parse_document_id(raw_id)
        if document_id is None:
            return NotFound()
        try:
            rows = await self.document_repository.update(
                document_id, data.content, data.doc_id, data.user_id
            )
        except DatabaseError as e:
            return self._failure("update document", e)
        return self._single(rows)

    async def delete_document(self, raw_id: str) -> Outcome:
        """Удаление документа"""
        document_id = parse_document_id(raw_id)
        if document_id is None:
            return NotFound()
        try:
            rows = await self.document_repository.delete(document_id)
        except DatabaseError as e:
            return self._failure("delete document", e)
        if rows:
            logger.info("Deleted document %s", document_id)
        return self._single(rows)

    @staticmethod
    def _single(rows) -> Outcome:
        if not rows:
            return NotFound()
        return Success(rows[:1])

    @staticmethod
    def _failure(action: str, error: BaseException) -> InfrastructureFailure:
        logger.error("Failed to %s", action, exc_info=error)
        return InfrastructureFailure(error)
