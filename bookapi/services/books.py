from dataclasses import dataclass

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from bookapi.database import ConnectionProvider
from bookapi.enums import ErrorKind
from bookapi.errors import NotFoundError, StorageError
from bookapi.models.book import BookRecord
from bookapi.schemas import Book

_BOOKS = BookRecord.__table__


@dataclass(frozen=True)
class LookupOutcome:
    book: Book | None = None
    error: NotFoundError | StorageError | None = None

    @property
    def kind(self) -> ErrorKind | None:
        """``None`` when the book was found, otherwise the failure kind."""
        return self.error.kind if self.error is not None else None

    @classmethod
    def found(cls, book: Book) -> "LookupOutcome":
        return cls(book=book)

    @classmethod
    def failed(cls, error: NotFoundError | StorageError) -> "LookupOutcome":
        return cls(error=error)


class BookLookupService:
    def __init__(self, provider: ConnectionProvider) -> None:
        self.provider = provider

    def get_book_by_id(self, book_id: int) -> Book:
        """Return the book stored under ``book_id``.

        The returned ``id`` is always ``book_id``. When several rows share the
        id, the last row the driver yields wins.

        Raises ``NotFoundError`` when no row matches and ``StorageError`` when
        the database cannot be reached or queried, or a matching row has a
        missing or non-text title or author.
        """
        book: Book | None = None
        stmt = select(_BOOKS).where(_BOOKS.c.ID == book_id)
        with self.provider.acquire() as connection:
            try:
                for row in connection.execute(stmt):
                    book = Book(id=book_id, title=row.TITLE, author_name=row.AUTHOR_NAME)
            except SQLAlchemyError as exc:
                raise StorageError(f"Book lookup failed for id {book_id}: {exc}") from exc
            except ValidationError as exc:
                raise StorageError(f"Book row for id {book_id} is incomplete: {exc}") from exc
        if book is None:
            raise NotFoundError(book_id)
        return book

    def lookup(self, book_id: int) -> LookupOutcome:
        try:
            book = self.get_book_by_id(book_id)
        except (NotFoundError, StorageError) as exc:
            return LookupOutcome.failed(exc)
        return LookupOutcome.found(book)
