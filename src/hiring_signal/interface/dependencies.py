"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from hiring_signal.infrastructure.config import get_settings
from hiring_signal.infrastructure.github_rest_adapter import GitHubRestAdapter
from hiring_signal.services.analyze_profile import AnalyzeProfileUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_sec))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> AnalyzeProfileUseCase:
    """Build the use case with the shared HTTP client injected."""
    settings = get_settings()

    if _http_client is None:
        raise RuntimeError("startup() was not called")

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client,
        token=token,
        commit_sample_size=settings.commit_sample_size,
    )

    return AnalyzeProfileUseCase(
        fetcher=github_adapter,
        readme_sample_size=settings.readme_sample_size,
        tree_sample_size=settings.tree_sample_size,
        max_concurrent_requests=settings.max_concurrent_requests,
    )
