from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from beercount.api.batches import router as batch_router
from beercount.api.beers import router as beer_router
from beercount.api.index import router as index_router
from beercount.core.config import Settings, settings as default_settings
from beercount.core.errors import register_exception_handlers
from beercount.core.request_logging import RequestLoggingMiddleware
from beercount.services.store import Store


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = Store.open(settings.database_url)
        try:
            store.create_schema()
            app.state.store = store
            yield
        finally:
            store.close()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(index_router)
    app.include_router(beer_router)
    app.include_router(batch_router)
    return app


app = create_app()
