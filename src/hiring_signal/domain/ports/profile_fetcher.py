"""Port: profile fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from hiring_signal.domain.entities import ActivityEvent, Profile, Repository
from hiring_signal.domain.value_objects import GitHubHandle


class ProfileFetcher(Protocol):
    """Abstract contract for fetching public GitHub account data."""

    async def fetch_profile(self, handle: GitHubHandle) -> Profile:
        """Return the account metadata."""
        ...

    async def fetch_repositories(self, handle: GitHubHandle) -> list[Repository]:
        """Return the account's public repositories, own and forked."""
        ...

    async def fetch_events(self, handle: GitHubHandle) -> list[ActivityEvent]:
        """Return recent public activity, newest first."""
        ...

    async def fetch_readme(self, handle: GitHubHandle, repo: str) -> str | None:
        """Return the decoded README text, or ``None`` when the repo has none."""
        ...

    async def fetch_tree(self, handle: GitHubHandle, repo: str, branch: str) -> list[str]:
        """Return every path in the recursive tree of *branch*."""
        ...

    async def fetch_commit_messages(self, handle: GitHubHandle, repo: str) -> list[str]:
        """Return full messages of the most recent commits on the default branch."""
        ...
