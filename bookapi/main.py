from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookapi.api.routes import books
from bookapi.config import Settings, get_settings
from bookapi.database import ConnectionProvider, create_connection_provider
from bookapi.logs import configure_logging


def create_app(settings: Settings | None = None, provider: ConnectionProvider | None = None) -> FastAPI:
    settings = settings or get_settings()
    provider = provider or create_connection_provider(settings)
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.connection_provider.dispose()

    app = FastAPI(
        title="Book Lookup API",
        version="0.1.0",
        description="Read-only lookup of books by numeric id.",
        lifespan=lifespan,
    )
    app.state.connection_provider = provider
    app.include_router(books.router)
    return app


app = create_app()
