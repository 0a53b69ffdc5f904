from fastapi import status
from fastapi.responses import JSONResponse

from documents_api.domains.documents.entities import InfrastructureFailure, NotFound, Outcome, Success

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def outcome_response(outcome: Outcome, status_code: int = status.HTTP_200_OK, body=None) -> JSONResponse:
    """Единая точка перевода результата сервиса в HTTP-ответ"""
    if isinstance(outcome, Success):
        return JSONResponse(status_code=status_code, content=outcome.rows if body is None else body)
    if isinstance(outcome, NotFound):
        return error_response(status.HTTP_404_NOT_FOUND, outcome.message)
    if isinstance(outcome, InfrastructureFailure):
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    raise TypeError(f"Unknown outcome: {outcome!r}")
