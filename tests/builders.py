"""Factories for domain inputs with sensible defaults."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from hiring_signal.domain.entities import (
    ActivityEvent,
    EventType,
    Profile,
    Repository,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


def make_profile(**overrides) -> Profile:
    fields = {
        "login": "octocat",
        "created_at": days_ago(2000),
        "updated_at": days_ago(1),
    }
    fields.update(overrides)
    return Profile(**fields)


def make_repo(name: str = "project", **overrides) -> Repository:
    fields = {
        "name": name,
        "created_at": days_ago(365),
        "pushed_at": days_ago(3),
    }
    fields.update(overrides)
    return Repository(**fields)


def make_event(kind: EventType, age_days: float = 1, repo_name: str = "octocat/project") -> ActivityEvent:
    return ActivityEvent(type=kind.value, created_at=days_ago(age_days), repo_name=repo_name)


def pushes(count: int, *, start_days: float = 0.5, repo_name: str = "octocat/project") -> list[ActivityEvent]:
    """One push per day, newest first."""
    return [make_event(EventType.PUSH, start_days + i, repo_name) for i in range(count)]


class FakeFetcher:
    """In-memory ProfileFetcher that records which samples were requested."""

    def __init__(
        self,
        profile: Profile | None = None,
        repositories: list[Repository] | None = None,
        events: list[ActivityEvent] | None = None,
        readmes: dict[str, object] | None = None,
        trees: dict[str, list[str]] | None = None,
        commits: dict[str, list[str]] | None = None,
        profile_error: Exception | None = None,
    ) -> None:
        self.profile = profile or make_profile()
        self.repositories = repositories or []
        self.events = events or []
        self.readmes = readmes or {}
        self.trees = trees or {}
        self.commits = commits or {}
        self.profile_error = profile_error
        self.readme_calls: list[str] = []
        self.tree_calls: list[tuple[str, str]] = []
        self.commit_calls: list[str] = []

    async def fetch_profile(self, handle):
        if self.profile_error is not None:
            raise self.profile_error
        return self.profile

    async def fetch_repositories(self, handle):
        return list(self.repositories)

    async def fetch_events(self, handle):
        return list(self.events)

    async def fetch_readme(self, handle, repo):
        self.readme_calls.append(repo)
        value = self.readmes.get(repo)
        if isinstance(value, Exception):
            raise value
        return value

    async def fetch_tree(self, handle, repo, branch):
        self.tree_calls.append((repo, branch))
        return self.trees.get(repo, [])

    async def fetch_commit_messages(self, handle, repo):
        self.commit_calls.append(repo)
        return self.commits.get(repo, [])
