import logging

from fastapi import APIRouter, Depends, Query

from bookapi.api.deps import get_book_service
from bookapi.api.responses import PrettyJSONResponse, error_response
from bookapi.enums import ErrorKind
from bookapi.errors import InputError
from bookapi.schemas import Book, ErrorResponse
from bookapi.services.books import BookLookupService
from bookapi.services.validation import parse_book_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["books"])


@router.get(
    "/book",
    response_model=Book,
    response_class=PrettyJSONResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_book(
    raw_id: str | None = Query(default=None, alias="id"),
    service: BookLookupService = Depends(get_book_service),
) -> PrettyJSONResponse:
    logger.info("The book id is: %s", raw_id)
    try:
        book_id = parse_book_id(raw_id)
    except InputError as exc:
        logger.warning("Rejected book id %r: %s", raw_id, exc)
        return error_response(exc)

    outcome = service.lookup(book_id)
    error = outcome.error
    if error is None and outcome.book is not None:
        return PrettyJSONResponse(content=outcome.book.model_dump(by_alias=True))

    if error.kind is ErrorKind.storage_failure:
        logger.error("Storage failure looking up book %s", book_id, exc_info=error)
    else:
        logger.warning("%s", error)
    return error_response(error)
