"""Dimension score calculators.

Each calculator is a total function returning an integer in ``[0, 100]``:
an additive point budget with per-factor caps, clamped at the end.  Every
calculator that only looks at original work returns 0 when the account has
no non-fork repositories.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Mapping, Sequence

from hiring_signal.domain.entities import (
    ActivityEvent,
    EventType,
    Profile,
    RepoReadme,
    Repository,
    ScoreBreakdown,
)
from hiring_signal.services.scoring_utils import (
    as_utc,
    average_readme_score,
    clamp,
    days_since,
    distinct_languages,
    events_of,
    latest,
    own_repositories,
    searchable_text,
    utc_date,
)

# ── Weights ─────────────────────────────────────────────────────────────────

WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "profile_completeness": 0.10,
        "repository_quality": 0.15,
        "commit_consistency": 0.12,
        "documentation": 0.15,
        "community_engagement": 0.08,
        "project_diversity": 0.08,
        "ownership_depth": 0.12,
        "engineering_maturity": 0.12,
        "impact": 0.08,
    }
)

CI_KEYWORDS: tuple[str, ...] = (
    "ci", "cd", "docker", "kubernetes", "github-actions", "travis", "circleci",
    "jenkins", "test", "testing", "jest", "pytest", "mocha",
)

NO_ACTIVITY_FLOOR = 10
LONG_LIVED_AFTER = timedelta(days=180)


def _share(count: int, total: int, points: float) -> float:
    return count / total * points


# ── Calculators ─────────────────────────────────────────────────────────────


def profile_completeness(profile: Profile) -> int:
    grants: list[tuple[object, int]] = [
        (profile.name, 20),
        (profile.bio, 20),
        (profile.blog, 15),
        (profile.location, 10),
        (profile.company, 10),
        (profile.email, 10),
        (profile.twitter_username, 5),
        (profile.hireable, 5),
        (profile.avatar_url and "identicon" not in profile.avatar_url, 5),
    ]
    return clamp(sum(points for value, points in grants if value))


def repository_quality(repositories: Sequence[Repository]) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    total = len(own)
    stars = sum(repo.stars for repo in own)

    score = min(total * 3, 20) + min(stars * 2, 20)
    score += _share(sum(1 for r in own if r.description and len(r.description) > 10), total, 20)
    score += _share(sum(1 for r in own if r.topics), total, 15)
    score += _share(sum(1 for r in own if r.license), total, 10)
    score += _share(sum(1 for r in own if r.homepage), total, 15)
    return clamp(score)


def commit_consistency(events: Sequence[ActivityEvent], now: datetime) -> int:
    pushes = events_of(events, EventType.PUSH)
    if not pushes:
        return NO_ACTIVITY_FLOOR

    active_days = {utc_date(event.created_at) for event in pushes}
    score = min(len(active_days) * 4, 50) + min(len(pushes) * 1.5, 30)

    age = days_since(latest(pushes).created_at, now)
    if age < 7:
        score += 20
    elif age < 30:
        score += 10
    return clamp(score)


def documentation(repositories: Sequence[Repository], readmes: Sequence[RepoReadme]) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    total = len(own)

    score = _share(sum(1 for r in own if r.description and len(r.description) > 20), total, 25)
    score += _share(sum(1 for r in own if len(r.topics) >= 2), total, 20)
    score += _share(sum(1 for r in own if r.homepage), total, 15)
    if readmes:
        score += average_readme_score(readmes) / 100 * 40
    return clamp(score)


def community_engagement(profile: Profile, events: Sequence[ActivityEvent]) -> int:
    score = min(profile.followers * 2, 30)
    score += min(profile.public_gists * 3, 15)
    score += min(len(events_of(events, EventType.PULL_REQUEST)) * 5, 25)
    score += min(len(events_of(events, EventType.ISSUES)) * 3, 15)
    score += min(len(events_of(events, EventType.FORK)) * 3, 15)
    return clamp(score)


def project_diversity(repositories: Sequence[Repository]) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    topics = {topic for repo in own for topic in repo.topics}
    score = min(len(distinct_languages(own)) * 12, 50)
    score += min(len(own) * 3, 30)
    score += min(len(topics) * 3, 20)
    return clamp(score)


def ownership_depth(
    repositories: Sequence[Repository], events: Sequence[ActivityEvent], now: datetime
) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    cutoff = as_utc(now) - LONG_LIVED_AFTER
    pushes_per_repo = Counter(event.repo_name for event in events_of(events, EventType.PUSH))

    score = min(sum(1 for r in own if r.size > 500) * 8, 25)
    score += min(sum(1 for r in own if as_utc(r.created_at) < cutoff) * 5, 20)
    score += min(sum(1 for count in pushes_per_repo.values() if count >= 3) * 8, 30)
    score += min(sum(1 for r in own if r.description and len(r.description) > 50) * 5, 25)
    return clamp(score)


def engineering_maturity(repositories: Sequence[Repository]) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    with_ci = sum(
        1 for repo in own if any(keyword in searchable_text(repo) for keyword in CI_KEYWORDS)
    )

    score = min(with_ci * 10, 35)
    score += min(sum(1 for r in own if r.has_wiki) * 3, 15)
    score += min(sum(1 for r in own if r.has_pages) * 5, 15)
    score += _share(sum(1 for r in own if r.license), len(own), 15)
    score += min(sum(1 for r in own if len(r.topics) >= 3) * 5, 20)
    return clamp(score)


def impact(repositories: Sequence[Repository]) -> int:
    own = own_repositories(repositories)
    if not own:
        return 0
    stars = sum(repo.stars for repo in own)
    forks = sum(repo.forks for repo in own)
    watchers = sum(repo.watchers for repo in own)

    score = min(stars / len(own) * 5, 30)
    score += min(forks * 3, 25)
    score += min(sum(1 for r in own if r.homepage) * 5, 20)
    score += min(sum(1 for r in own if r.open_issues > 0) * 5, 15)
    score += min(watchers, 10)
    return clamp(score)


# ── Aggregation ─────────────────────────────────────────────────────────────


def calculate_breakdown(
    profile: Profile,
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    readmes: Sequence[RepoReadme],
    now: datetime,
) -> ScoreBreakdown:
    """Run all nine calculators, before any cross-dimension blending."""
    return ScoreBreakdown(
        profile_completeness=profile_completeness(profile),
        repository_quality=repository_quality(repositories),
        commit_consistency=commit_consistency(events, now),
        documentation=documentation(repositories, readmes),
        community_engagement=community_engagement(profile, events),
        project_diversity=project_diversity(repositories),
        ownership_depth=ownership_depth(repositories, events, now),
        engineering_maturity=engineering_maturity(repositories),
        impact=impact(repositories),
    )


def overall_score(breakdown: ScoreBreakdown) -> int:
    """Weighted sum of the nine dimensions, rounded and clamped."""
    return clamp(sum(getattr(breakdown, name) * weight for name, weight in WEIGHTS.items()))
