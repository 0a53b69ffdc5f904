from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentBody(BaseModel):
    """Тело запроса на создание/обновление; отсутствующие поля передаются как NULL"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    content: Optional[str] = None
    doc_id: Optional[str] = Field(None, alias="docId")
    user_id: Optional[str] = Field(None, alias="userId")


class DocumentResponse(BaseModel):
    """Строка таблицы documents"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    content: Optional[str] = None
    doc_id: Optional[str] = Field(None, alias="docId")
    user_id: Optional[str] = Field(None, alias="userId")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
