from fastapi import Request

from bookapi.database import ConnectionProvider
from bookapi.services.books import BookLookupService


def get_connection_provider(request: Request) -> ConnectionProvider:
    return request.app.state.connection_provider


def get_book_service(request: Request) -> BookLookupService:
    return BookLookupService(get_connection_provider(request))
