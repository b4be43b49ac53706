"""FastAPI application factory."""

from __future__ import annotations

from typing import Generator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from duelhistory.client.torii import ToriiClient
from duelhistory.config import load_settings


def get_torii_client() -> Generator[ToriiClient, None, None]:
    """Dependency to get a Torii client.

    Yields:
        Client configured from the environment, closed after the request.
    """
    client = ToriiClient.from_settings(load_settings())
    try:
        yield client
    finally:
        client.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Duel History API",
        description="Pistols at Dawn player duel history",
        version="0.1.0",
    )

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Next.js dev server
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from duelhistory.api.routes import duels

    app.include_router(duels.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
