from documents_api.domains.documents.entities import (
    InfrastructureFailure, NotFound, Outcome, Success, parse_document_id
)
from documents_api.domains.documents.schemas import (
    DocumentBody, DocumentResponse, ErrorResponse, MessageResponse
)
from documents_api.domains.documents.services import DocumentService

__all__ = [
    "InfrastructureFailure", "NotFound", "Outcome", "Success", "parse_document_id",
    "DocumentBody", "DocumentResponse", "ErrorResponse", "MessageResponse",
    "DocumentService"
]
