"""Small numeric and filtering helpers shared by every scorer."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Iterable, Sequence

from hiring_signal.domain.entities import ActivityEvent, EventType, RepoReadme, Repository

_SECONDS_PER_DAY = 86_400


def round_half_up(value: float) -> int:
    """Round halves upwards (``2.5 -> 3``), unlike the built-in ``round``."""
    return math.floor(value + 0.5)


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    """Round *value* half-up and clamp it into ``[low, high]``."""
    return max(low, min(high, round_half_up(value)))


def own_repositories(repositories: Iterable[Repository]) -> list[Repository]:
    """Return the non-fork repositories, preserving input order."""
    return [repo for repo in repositories if not repo.fork]


def events_of(events: Iterable[ActivityEvent], kind: EventType) -> list[ActivityEvent]:
    return [event for event in events if event.type == kind.value]


def latest(events: Sequence[ActivityEvent]) -> ActivityEvent | None:
    """The most recent event, regardless of the order the caller supplied."""
    if not events:
        return None
    return max(events, key=lambda event: as_utc(event.created_at))


def as_utc(moment: datetime) -> datetime:
    """Convert *moment* to UTC; naive values are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_date(moment: datetime) -> date:
    """Calendar day of *moment* in UTC, whatever offset it carries."""
    return as_utc(moment).date()


def days_since(moment: datetime, now: datetime) -> float:
    return (as_utc(now) - as_utc(moment)).total_seconds() / _SECONDS_PER_DAY


def average_readme_score(readmes: Sequence[RepoReadme]) -> float:
    """Mean README analyzer score, 0 when no README was sampled."""
    if not readmes:
        return 0.0
    return sum(r.analysis.score for r in readmes) / len(readmes)


def distinct_languages(repositories: Iterable[Repository]) -> set[str]:
    return {repo.language for repo in repositories if repo.language}


def searchable_text(repo: Repository, *, include_name: bool = False) -> str:
    """Lower-cased description + topics (+ name) for keyword matching."""
    parts = [repo.description or "", " ".join(repo.topics)]
    if include_name:
        parts.append(repo.name)
    return " ".join(parts).lower()
