"""Rule-based strength and red-flag detection.

Every rule is evaluated independently; any number may fire at once.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from hiring_signal.domain.entities import (
    ActivityEvent,
    EventType,
    Profile,
    Repository,
    Severity,
    Signal,
)
from hiring_signal.services.scoring_utils import (
    days_since,
    distinct_languages,
    events_of,
    latest,
    own_repositories,
    round_half_up,
    searchable_text,
)

CI_TOPICS: frozenset[str] = frozenset({"docker", "ci", "testing", "github-actions"})
TUTORIAL_KEYWORDS: tuple[str, ...] = (
    "tutorial", "course", "udemy", "coursera", "freecodecamp", "todo-app", "hello-world", "learn",
)


def identify_strengths(
    profile: Profile,
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    now: datetime,
) -> tuple[Signal, ...]:
    own = own_repositories(repositories)
    signals: list[Signal] = []

    stars = sum(repo.stars for repo in own)
    if stars >= 10:
        signals.append(
            Signal("Star Power", f"{stars} total stars, validated by the community", Severity.HIGH)
        )
    if profile.followers >= 10:
        signals.append(
            Signal(
                "Growing Network",
                f"{profile.followers} followers indicates visibility",
                Severity.MEDIUM,
            )
        )
    if profile.bio and profile.name and profile.blog:
        signals.append(
            Signal(
                "Professional Profile",
                "Complete profile with bio, name, and website",
                Severity.HIGH,
            )
        )

    languages = distinct_languages(own)
    if len(languages) >= 3:
        signals.append(
            Signal("Polyglot Developer", f"Proficient in {len(languages)} languages", Severity.MEDIUM)
        )

    last_push = latest(events_of(events, EventType.PUSH))
    if last_push is not None and days_since(last_push.created_at, now) < 7:
        signals.append(Signal("Active Contributor", "Pushed code in the last week", Severity.HIGH))

    if sum(1 for repo in own if repo.license) >= 3:
        signals.append(
            Signal("Open Source Mindset", "Multiple licensed projects", Severity.MEDIUM)
        )
    if sum(1 for repo in own if CI_TOPICS.intersection(repo.topics)) >= 2:
        signals.append(
            Signal("Engineering Practices", "CI/CD and testing signals detected", Severity.HIGH)
        )

    large = sum(1 for repo in own if repo.size > 1000)
    if large >= 2:
        signals.append(
            Signal("Deep Contributor", f"{large} substantial codebases maintained", Severity.HIGH)
        )

    forks = sum(repo.forks for repo in own)
    if forks >= 5:
        signals.append(
            Signal("Community Impact", f"{forks} forks: others build on your work", Severity.MEDIUM)
        )
    return tuple(signals)


def identify_red_flags(
    profile: Profile,
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    now: datetime,
) -> tuple[Signal, ...]:
    own = own_repositories(repositories)
    fork_count = len(repositories) - len(own)
    signals: list[Signal] = []

    if not profile.bio:
        signals.append(
            Signal(
                "Missing Bio",
                "No bio set; recruiters skip profiles without introductions",
                Severity.HIGH,
            )
        )
    if not profile.name:
        signals.append(
            Signal("No Display Name", "Using only username feels anonymous", Severity.MEDIUM)
        )

    weak_descriptions = sum(
        1 for repo in own if not repo.description or len(repo.description) < 10
    )
    if weak_descriptions > len(own) * 0.5:
        signals.append(
            Signal(
                "Poor Descriptions",
                f"{weak_descriptions} repos lack meaningful descriptions",
                Severity.HIGH,
            )
        )

    pushes = events_of(events, EventType.PUSH)
    if not pushes:
        signals.append(
            Signal(
                "No Recent Activity",
                "No public commits visible, appears inactive",
                Severity.HIGH,
            )
        )

    if len(own) < 3:
        signals.append(
            Signal("Few Original Projects", f"Only {len(own)} non-forked repos", Severity.MEDIUM)
        )

    # Ratio is taken over every repository, forks included.
    if fork_count > 0 and fork_count / len(repositories) > 0.8:
        percent = round_half_up(fork_count / len(repositories) * 100)
        signals.append(
            Signal(
                "Fork Heavy Profile",
                f"{percent}% of repos are forks, showing limited original work",
                Severity.HIGH,
            )
        )

    last_push = latest(pushes)
    if last_push is not None:
        idle_days = days_since(last_push.created_at, now)
        if idle_days > 90:
            signals.append(
                Signal(
                    "Extended Inactivity",
                    f"Last commit was {round_half_up(idle_days)} days ago",
                    Severity.HIGH,
                )
            )

    empty = sum(1 for repo in own if repo.size < 10)
    if empty >= 3:
        signals.append(
            Signal(
                "Empty Repositories",
                f"{empty} repos appear to be empty or minimal",
                Severity.MEDIUM,
            )
        )

    tutorials = sum(
        1
        for repo in own
        if any(kw in searchable_text(repo, include_name=True) for kw in TUTORIAL_KEYWORDS)
    )
    if tutorials >= 3 and tutorials / len(own) > 0.5:
        signals.append(
            Signal(
                "Tutorial-Heavy Portfolio",
                f"{tutorials} repos appear to be tutorial/course projects",
                Severity.MEDIUM,
            )
        )

    untagged = sum(1 for repo in own if not repo.topics)
    if untagged > len(own) * 0.7:
        signals.append(Signal("Missing Topics/Tags", "Most repos lack topic tags", Severity.MEDIUM))
    return tuple(signals)
