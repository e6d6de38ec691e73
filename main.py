from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from notification_feed.config import get_settings
from notification_feed.infrastructure.notifications import (
    grouped_notification_publisher,
    notification_store,
)
from notification_feed.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Drain pending websocket pushes and release the snapshot store on shutdown."""

    yield
    await grouped_notification_publisher.flush()
    notification_store.clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="Notification Feed", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
