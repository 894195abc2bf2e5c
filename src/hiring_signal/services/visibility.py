"""How the profile looks from the outside.

Language mix, data coverage, discoverability, the 15-second first
impression and the condensed recruiter snapshot.
"""

from __future__ import annotations

import re
from dataclasses import fields
from typing import Sequence

from hiring_signal.domain.entities import (
    ActivityEvent,
    ConfidenceLabel,
    DiscoverabilityScore,
    EventType,
    FirstImpressionResult,
    HireLabel,
    Profile,
    Recommendation,
    RecruiterSnapshot,
    RepoReadme,
    Repository,
    ScoreBreakdown,
    SignalConfidence,
)
from hiring_signal.services.scoring_utils import (
    average_readme_score,
    clamp,
    distinct_languages,
    events_of,
    own_repositories,
    round_half_up,
)

DIMENSION_LABELS: dict[str, str] = {
    "profile_completeness": "Profile Completeness",
    "repository_quality": "Repository Quality",
    "commit_consistency": "Consistent Activity",
    "documentation": "Documentation",
    "community_engagement": "Community Engagement",
    "project_diversity": "Project Diversity",
    "ownership_depth": "Deep Ownership",
    "engineering_maturity": "Engineering Maturity",
    "impact": "Community Impact",
}

_LINKEDIN = re.compile(r"linkedin", re.IGNORECASE)
_SHOWCASE_SIZE = 6


def language_distribution(repositories: Sequence[Repository]) -> tuple[tuple[str, int], ...]:
    """(language, count) pairs over original repositories, in first-seen order."""
    distribution: dict[str, int] = {}
    for repo in own_repositories(repositories):
        if repo.language:
            distribution[repo.language] = distribution.get(repo.language, 0) + 1
    return tuple(distribution.items())


def _has_custom_avatar(profile: Profile) -> bool:
    return bool(profile.avatar_url) and "identicon" not in profile.avatar_url


# ── Signal confidence ───────────────────────────────────────────────────────


def signal_confidence(
    profile: Profile,
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    readmes: Sequence[RepoReadme],
) -> SignalConfidence:
    """How much evidence the report rests on."""
    coverage = 0
    factors: list[str] = []

    if len(repositories) >= 10:
        coverage += 20
        factors.append("Sufficient repo sample size")
    elif len(repositories) >= 5:
        coverage += 10
        factors.append("Moderate repo sample")
    else:
        factors.append("Limited repos for analysis")

    if len(events) >= 50:
        coverage += 20
        factors.append("Rich activity history")
    elif len(events) >= 20:
        coverage += 10
        factors.append("Moderate activity data")
    else:
        factors.append("Limited recent activity data")

    if profile.bio and profile.name:
        coverage += 15
        factors.append("Profile identity verified")

    if len(readmes) >= 3:
        coverage += 20
        factors.append("README content analyzed")
    elif readmes:
        coverage += 10
        factors.append("Partial README data")

    if len(own_repositories(repositories)) >= 5:
        coverage += 15
        factors.append("Multiple original projects")
    if len(events_of(events, EventType.PUSH)) >= 10:
        coverage += 10
        factors.append("Strong commit data")

    score = clamp(coverage)
    if score >= 80:
        label = ConfidenceLabel.HIGH
    elif score >= 50:
        label = ConfidenceLabel.MEDIUM
    else:
        label = ConfidenceLabel.LOW
    return SignalConfidence(score=score, label=label, data_coverage=score, factors=tuple(factors))


# ── Discoverability ─────────────────────────────────────────────────────────


def discoverability(profile: Profile, repositories: Sequence[Repository]) -> DiscoverabilityScore:
    own = own_repositories(repositories)
    score = 0
    factors: list[str] = []
    missing: list[str] = []

    bio_length = len(profile.bio or "")
    if bio_length >= 100:
        score += 20
        factors.append(f"Rich bio ({bio_length} chars)")
    elif bio_length >= 30:
        score += 10
        factors.append("Bio present")
    else:
        missing.append("Detailed bio (100+ chars)")

    has_portfolio_link = bool(profile.blog)
    if has_portfolio_link:
        score += 15
        factors.append("Portfolio/website linked")
    else:
        missing.append("Portfolio link")

    has_social_links = bool(profile.twitter_username or profile.email)
    if has_social_links:
        score += 10
        factors.append("Social links present")
    else:
        missing.append("Social links (Twitter/email)")

    has_linkedin = bool(profile.blog and _LINKEDIN.search(profile.blog))
    if has_linkedin:
        score += 10
        factors.append("LinkedIn linked")

    # A repository named after the account renders as the profile README.
    login = profile.login.lower()
    has_profile_readme = any(repo.name.lower() == login for repo in repositories)
    if has_profile_readme:
        score += 15
        factors.append("Profile README repo found")
    else:
        missing.append("Profile README")

    demo_link_count = sum(1 for repo in own if repo.homepage)
    if demo_link_count >= 3:
        score += 15
        factors.append(f"{demo_link_count} repos with live demos")
    elif demo_link_count >= 1:
        score += 8
        factors.append(f"{demo_link_count} demo link(s)")
    else:
        missing.append("Live demo links on repos")

    showcase = sorted(own, key=lambda repo: repo.stars, reverse=True)[:_SHOWCASE_SIZE]
    described = sum(1 for repo in showcase if repo.description and len(repo.description) > 20)
    has_pinned_showcase = described >= 3
    if has_pinned_showcase:
        score += 15
        factors.append("Top repos well-described")
    else:
        missing.append("Better showcase repo descriptions")

    return DiscoverabilityScore(
        score=clamp(score),
        bio_length=bio_length,
        has_portfolio_link=has_portfolio_link,
        has_social_links=has_social_links,
        has_profile_readme=has_profile_readme,
        has_linkedin=has_linkedin,
        has_pinned_showcase=has_pinned_showcase,
        demo_link_count=demo_link_count,
        factors=tuple(factors),
        missing=tuple(missing),
    )


# ── First impression ────────────────────────────────────────────────────────


def first_impression(
    profile: Profile,
    repositories: Sequence[Repository],
    readmes: Sequence[RepoReadme],
    overall_score: int,
) -> FirstImpressionResult:
    """A 15-second recruiter scan next to the full portfolio score."""
    own = own_repositories(repositories)
    quick = 0
    quick_factors: list[str] = []

    def grant(ok: bool, points: int, hit: str, miss: str | None) -> None:
        nonlocal quick
        if ok:
            quick += points
            quick_factors.append(hit)
        elif miss is not None:
            quick_factors.append(f"❌ {miss}")

    grant(bool(profile.bio and len(profile.bio) > 10), 20, "Professional bio present", "Missing or weak bio")
    grant(bool(profile.name), 10, "Display name set", "No display name")
    grant(_has_custom_avatar(profile), 10, "Custom avatar", "Default avatar")
    grant(
        sum(1 for repo in own if repo.description and len(repo.description) > 15) >= 3,
        15,
        "Repos have clear descriptions",
        "Repos lack descriptions",
    )
    grant(len(readmes) >= 2, 15, "READMEs found on top repos", "Missing READMEs on top repos")

    stars = sum(repo.stars for repo in own)
    if stars >= 10:
        grant(True, 15, f"{stars} stars visible", None)
    else:
        grant(stars >= 3, 8, "Some star traction", "Low star count")

    grant(any(repo.homepage for repo in own), 10, "Live demo links present", "No live demo links")
    grant(bool(profile.blog), 5, "Portfolio link visible", None)

    deep_factors = [f"Overall portfolio score: {overall_score}/100"]
    if readmes:
        deep_factors.append(f"Avg README quality: {round_half_up(average_readme_score(readmes))}/100")
    deep_factors.append(f"{len(distinct_languages(own))} languages across {len(own)} original repos")
    deep_factors.append(f"{len(repositories) - len(own)} forks vs {len(own)} original projects")

    return FirstImpressionResult(
        quick_scan_score=min(100, quick),
        deep_dive_score=overall_score,
        quick_scan_factors=tuple(quick_factors),
        deep_dive_factors=tuple(deep_factors),
    )


# ── Recruiter snapshot ──────────────────────────────────────────────────────


def hire_label(overall_score: int) -> HireLabel:
    if overall_score >= 80:
        return HireLabel.HIRING_READY
    if overall_score >= 65:
        return HireLabel.COMPETITIVE
    if overall_score >= 50:
        return HireLabel.FOUNDATIONAL
    return HireLabel.NEEDS_WORK


def recruiter_snapshot(
    overall_score: int,
    scores: ScoreBreakdown,
    recommendations: Sequence[Recommendation],
) -> RecruiterSnapshot:
    """Condensed view: readiness band, best and worst dimension, top fix."""
    ranked = sorted(
        ((f.name, getattr(scores, f.name)) for f in fields(scores)),
        key=lambda item: item[1],
        reverse=True,
    )
    strongest, _ = ranked[0]
    weakest, weakest_score = ranked[-1]

    top = recommendations[0] if recommendations else None
    return RecruiterSnapshot(
        hire_readiness=overall_score,
        hire_label=hire_label(overall_score),
        biggest_strength=DIMENSION_LABELS[strongest],
        biggest_concern=f"Weak {DIMENSION_LABELS[weakest]} ({weakest_score}/100)",
        top_fix=top.title if top else "Maintain momentum",
        top_fix_increase=(top.score_increase or 0) if top else 0,
    )
