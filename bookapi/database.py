import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from bookapi.config import Settings
from bookapi.errors import StorageError

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """Hands out scoped connections from a single engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def acquire(self) -> Iterator[Connection]:
        """Yield a connection that is returned to the pool on every exit path.

        Raises ``StorageError`` when no connection can be opened.
        """
        try:
            connection = self.engine.connect()
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to acquire database connection: {exc}") from exc
        with connection:
            yield connection

    def dispose(self) -> None:
        self.engine.dispose()


def create_connection_provider(settings: Settings) -> ConnectionProvider:
    engine = create_engine(settings.database_url, pool_pre_ping=True, echo=settings.database_echo)
    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return ConnectionProvider(engine)
