"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wire.config import Settings
from wire.interface.api.routes import accounts, auth, health
from wire.util.di.container import create_container, setup_di
from wire.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire must be configured before this is called; scripts/start_app.py
    does it in production.

    Args:
        container: DI container to serve requests from; the production
            container when omitted. Tests pass one built on mock providers.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="RazeWire Accounts API",
        description="Sign-in and account management for RazeWire, Cambodian news",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local frontend
        ],
        allow_credentials=True,  # Session cookie
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(accounts.router)

    return app_instance


# Imported by uvicorn; see scripts/start_app.py
app = create_app()
