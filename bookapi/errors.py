from bookapi.enums import ErrorKind
from bookapi.schemas import ErrorResponse


class BookApiError(Exception):
    kind: ErrorKind

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.kind, message=str(self))


class InputError(BookApiError, ValueError):
    kind = ErrorKind.invalid_input

    def __init__(self, value: str | None, message: str) -> None:
        super().__init__(message)
        self.value = value

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.kind, message=str(self), value=self.value)


class NotFoundError(BookApiError, LookupError):
    kind = ErrorKind.not_found

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id: {book_id} wasn't found")
        self.book_id = book_id

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.kind, message=str(self), book_id=self.book_id)


class StorageError(BookApiError):
    kind = ErrorKind.storage_failure
