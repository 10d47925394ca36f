from sqlalchemy import insert

from bookapi.database import ConnectionProvider
from bookapi.models.book import BookRecord


def insert_books(provider: ConnectionProvider, *rows: tuple[int, str, str]) -> None:
    with provider.engine.begin() as connection:
        connection.execute(
            insert(BookRecord.__table__),
            [{"ID": book_id, "TITLE": title, "AUTHOR_NAME": author} for book_id, title, author in rows],
        )
