"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from hiring_signal.interface.dependencies import shutdown, startup
from hiring_signal.interface.error_handlers import register_error_handlers
from hiring_signal.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of the shared HTTP client."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Hiring Signal",
        version="1.0.0",
        description=(
            "Takes a public GitHub username and returns a recruiter-oriented "
            "report: weighted dimension scores, strengths and red flags, "
            "recruiter lenses, career alignment and ranked improvements."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
