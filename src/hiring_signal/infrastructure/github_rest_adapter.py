"""GitHub REST API adapter — implements the ProfileFetcher port."""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from hiring_signal.domain.entities import ActivityEvent, Profile, Repository
from hiring_signal.domain.exceptions import (
    GitHubAccessDeniedError,
    GitHubFetchError,
    GitHubRateLimitError,
    ProfileNotFoundError,
)
from hiring_signal.domain.value_objects import GitHubHandle

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "github-hiring-signal/1.0"
_PAGE_SIZE = "100"


def _timestamp(raw: str | None) -> datetime | None:
    """Parse GitHub's ISO-8601 ``...Z`` timestamps into aware UTC datetimes."""
    if not raw:
        return None
    return datetime.fromisoformat(raw.replace("Z", "+00:00")).astimezone(timezone.utc)


# ── JSON → entity mapping ───────────────────────────────────────────────────


def profile_from_json(data: dict[str, Any]) -> Profile:
    created = _timestamp(data.get("created_at"))
    if created is None:
        raise GitHubFetchError(f"Profile payload for {data.get('login')!r} has no created_at")
    return Profile(
        login=data["login"],
        created_at=created,
        updated_at=_timestamp(data.get("updated_at")) or created,
        name=data.get("name"),
        bio=data.get("bio"),
        company=data.get("company"),
        location=data.get("location"),
        blog=data.get("blog"),
        email=data.get("email"),
        twitter_username=data.get("twitter_username"),
        hireable=data.get("hireable"),
        avatar_url=data.get("avatar_url") or "",
        followers=data.get("followers", 0),
        following=data.get("following", 0),
        public_repos=data.get("public_repos", 0),
        public_gists=data.get("public_gists", 0),
    )


def repository_from_json(data: dict[str, Any]) -> Repository:
    created = _timestamp(data.get("created_at"))
    if created is None:
        raise GitHubFetchError(f"Repository payload for {data.get('name')!r} has no created_at")
    license_info = data.get("license") or {}
    return Repository(
        name=data["name"],
        created_at=created,
        # Never-pushed repositories report null; treat creation as the last push.
        pushed_at=_timestamp(data.get("pushed_at")) or created,
        description=data.get("description"),
        homepage=data.get("homepage"),
        language=data.get("language"),
        stars=data.get("stargazers_count", 0),
        watchers=data.get("watchers_count", 0),
        forks=data.get("forks_count", 0),
        open_issues=data.get("open_issues_count", 0),
        topics=tuple(data.get("topics") or ()),
        has_wiki=bool(data.get("has_wiki")),
        has_pages=bool(data.get("has_pages")),
        license=license_info.get("key"),
        size=data.get("size", 0),
        fork=bool(data.get("fork")),
        default_branch=data.get("default_branch") or "main",
    )


def event_from_json(data: dict[str, Any]) -> ActivityEvent | None:
    created = _timestamp(data.get("created_at"))
    if created is None:
        return None
    return ActivityEvent(
        type=data.get("type", ""),
        created_at=created,
        repo_name=(data.get("repo") or {}).get("name", ""),
    )


def decode_readme(data: dict[str, Any]) -> str:
    """Decode the ``/readme`` payload; GitHub wraps base64 content at 60 columns."""
    content = data.get("content", "")
    if data.get("encoding") != "base64":
        return content
    try:
        return base64.b64decode(content.replace("\n", "")).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as exc:
        raise GitHubFetchError(f"Malformed README payload: {exc}") from exc


# ── Adapter ─────────────────────────────────────────────────────────────────


class GitHubRestAdapter:
    """Concrete ProfileFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        commit_sample_size: int = 30,
    ) -> None:
        self._client = client
        self._commit_sample_size = commit_sample_size
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_profile(self, handle: GitHubHandle) -> Profile:
        """GET /users/{login} → Profile."""
        resp = await self._api_get(
            f"/users/{handle.login}",
            not_found=(
                f"GitHub user '{handle.login}' not found. "
                "Make sure the username is spelled correctly."
            ),
        )
        return profile_from_json(resp.json())

    async def fetch_repositories(self, handle: GitHubHandle) -> list[Repository]:
        """GET /users/{login}/repos (most recently updated first) → [Repository]."""
        resp = await self._api_get(
            f"/users/{handle.login}/repos",
            params={"per_page": _PAGE_SIZE, "sort": "updated", "direction": "desc"},
        )
        return [repository_from_json(item) for item in resp.json()]

    async def fetch_events(self, handle: GitHubHandle) -> list[ActivityEvent]:
        """GET /users/{login}/events/public → [ActivityEvent]."""
        resp = await self._api_get(
            f"/users/{handle.login}/events/public",
            params={"per_page": _PAGE_SIZE},
        )
        events = (event_from_json(item) for item in resp.json())
        return [event for event in events if event is not None]

    async def fetch_readme(self, handle: GitHubHandle, repo: str) -> str | None:
        """GET /repos/{login}/{repo}/readme → decoded text, ``None`` if absent."""
        try:
            resp = await self._api_get(f"/repos/{handle.login}/{repo}/readme")
        except ProfileNotFoundError:
            logger.debug("No README in %s/%s", handle.login, repo)
            return None
        return decode_readme(resp.json())

    async def fetch_tree(self, handle: GitHubHandle, repo: str, branch: str) -> list[str]:
        """GET /repos/{login}/{repo}/git/trees/{branch}?recursive=1 → [path]."""
        resp = await self._api_get(
            f"/repos/{handle.login}/{repo}/git/trees/{branch}",
            params={"recursive": "1"},
        )
        data = resp.json()
        if data.get("truncated"):
            logger.debug("Tree of %s/%s truncated by GitHub", handle.login, repo)
        return [item["path"] for item in data.get("tree", []) if "path" in item]

    async def fetch_commit_messages(self, handle: GitHubHandle, repo: str) -> list[str]:
        """GET /repos/{login}/{repo}/commits → [message]."""
        resp = await self._api_get(
            f"/repos/{handle.login}/{repo}/commits",
            params={"per_page": str(self._commit_sample_size)},
        )
        return [
            item["commit"]["message"]
            for item in resp.json()
            if item.get("commit", {}).get("message") is not None
        ]

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        not_found: str | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{_GITHUB_API}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            logger.warning("Network error fetching %s: %s", url, exc)
            raise GitHubFetchError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise ProfileNotFoundError(not_found or f"GitHub resource not found: {endpoint}")

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                logger.warning("GitHub rate limit exhausted (resets %s)", reset_str)
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise GitHubAccessDeniedError(
                f"Access denied by GitHub for {endpoint}."
            )

        if resp.status_code == 429:
            logger.warning("GitHub returned HTTP 429 for %s", url)
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise GitHubFetchError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )
