from pydantic import BaseModel, ConfigDict, Field

from bookapi.enums import ErrorKind


class Book(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    author_name: str = Field(alias="authorName")


class ErrorResponse(BaseModel):
    error: ErrorKind
    message: str
    book_id: int | None = None
    value: str | None = None
