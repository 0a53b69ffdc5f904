from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from documents_api.api.http.responses import outcome_response
from documents_api.db.gateway import DatabaseGateway, get_gateway
from documents_api.domains.documents.entities import Success
from documents_api.domains.documents.schemas import (
    DocumentBody, DocumentResponse, ErrorResponse, MessageResponse
)
from documents_api.domains.documents.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
FAILED = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


def get_document_service(gateway: DatabaseGateway = Depends(get_gateway)) -> DocumentService:
    return DocumentService(gateway)


@router.get("", response_model=List[DocumentResponse], responses=FAILED)
async def list_documents(service: DocumentService = Depends(get_document_service)):
    """Получение списка документов"""
    outcome = await service.list_documents()
    return outcome_response(outcome)


@router.get("/{document_id}", response_model=DocumentResponse, responses={**NOT_FOUND, **FAILED})
async def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Получение документа по id"""
    outcome = await service.get_document(document_id)
    return outcome_response(outcome, body=_first(outcome))


@router.post(
    "",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=FAILED,
)
async def create_document(
    document_data: Optional[DocumentBody] = Body(None),
    service: DocumentService = Depends(get_document_service)
):
    """Создание нового документа"""
    outcome = await service.create_document(document_data or DocumentBody())
    return outcome_response(outcome, status.HTTP_201_CREATED, body=_first(outcome))


@router.put("/{document_id}", response_model=DocumentResponse, responses={**NOT_FOUND, **FAILED})
async def update_document(
    document_id: str,
    update_data: Optional[DocumentBody] = Body(None),
    service: DocumentService = Depends(get_document_service)
):
    """Обновление документа"""
    outcome = await service.update_document(document_id, update_data or DocumentBody())
    return outcome_response(outcome, body=_first(outcome))


@router.delete("/{document_id}", response_model=MessageResponse, responses={**NOT_FOUND, **FAILED})
async def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Удаление документа"""
    outcome = await service.delete_document(document_id)
    return outcome_response(outcome, body={"message": "Document deleted successfully"})


def _first(outcome):
    if isinstance(outcome, Success) and outcome.rows:
        return outcome.first
    return None
