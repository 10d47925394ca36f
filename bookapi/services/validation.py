import re

from bookapi.errors import InputError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_book_id(raw: str | None) -> int:
    """Parse a query-string id as a signed 32-bit integer.

    Only an optional sign and ASCII digits are accepted, so inputs that
    ``int()`` would tolerate (surrounding whitespace, ``1_000``) are rejected.
    """
    if raw is None:
        raise InputError(raw, "Book id is required")
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise InputError(raw, f'For input string: "{raw}"')
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InputError(raw, f'Book id out of range: "{raw}"')
    return value
