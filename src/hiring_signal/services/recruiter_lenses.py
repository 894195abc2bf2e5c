"""Recruiter lenses — three persona rubrics scored independently of each other.

Each lens grants points from its own factor set, records highlights and
concerns in the order the points were evaluated, and renders a verdict from
a per-lens template table selected by score band.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from hiring_signal.domain.entities import (
    ActivityEvent,
    EventType,
    LensResult,
    RecruiterLens,
    RepoReadme,
    Repository,
)
from hiring_signal.services.scoring_utils import (
    average_readme_score,
    clamp,
    distinct_languages,
    events_of,
    own_repositories,
    searchable_text,
    utc_date,
)


@dataclass(frozen=True, slots=True)
class LensProfile:
    """Label and verdict templates for one recruiter persona.

    ``strong`` receives ``{highlight}``, ``moderate`` receives ``{concern}``
    and ``weak`` receives ``{concerns}``.
    """

    label: str
    strong: str
    moderate: str
    moderate_fallback: str
    weak: str


LENSES: Mapping[RecruiterLens, LensProfile] = MappingProxyType(
    {
        RecruiterLens.STARTUP: LensProfile(
            label="Startup Recruiter",
            strong=(
                "Strong shipping velocity and product awareness. {highlight} "
                "Would advance to technical interview."
            ),
            moderate=(
                "Moderate potential: shows initiative but lacks {concern}. "
                "Would request live demo before moving forward."
            ),
            moderate_fallback="deployed demos",
            weak=(
                "Insufficient shipping signals. {concerns}. "
                "Needs portfolio polish before startup readiness."
            ),
        ),
        RecruiterLens.ENTERPRISE: LensProfile(
            label="Enterprise Recruiter",
            strong=(
                "Strong engineering discipline with documented practices. {highlight} "
                "Fits enterprise standards."
            ),
            moderate=(
                "Some structure present but {concern}. "
                "Risk for large-scale systems without more maturity signals."
            ),
            moderate_fallback="gaps in test coverage",
            weak=(
                "Insufficient test coverage and documentation signals. {concerns}. "
                "Not enterprise-ready yet."
            ),
        ),
        RecruiterLens.AIML: LensProfile(
            label="AI/ML Recruiter",
            strong=(
                "Clear ML/AI specialization with research depth. {highlight} "
                "Strong candidate for technical roles."
            ),
            moderate=(
                "Some AI/ML exposure but {concern}. "
                "Would probe for deeper ML system design knowledge."
            ),
            moderate_fallback="lacks experiment tracking",
            weak=(
                "No significant ML/AI portfolio signals. {concerns}. "
                "Needs dedicated ML projects to be competitive."
            ),
        ),
    }
)

STRONG_BAND = 70
MODERATE_BAND = 45

ML_KEYWORDS: tuple[str, ...] = (
    "machine learning", "deep learning", "neural", "tensorflow", "pytorch", "ml", "ai",
    "nlp", "computer vision", "data science", "model", "training", "dataset", "notebook",
)
ML_LANGUAGES: frozenset[str] = frozenset({"Python", "R", "Julia"})
RESEARCH_KEYWORDS: tuple[str, ...] = ("paper", "research", "experiment", "benchmark")


def render_verdict(
    lens: RecruiterLens, score: int, highlights: Sequence[str], concerns: Sequence[str]
) -> str:
    """Pick the template for *score*'s band and fill in the lead finding."""
    profile = LENSES[lens]
    if score >= STRONG_BAND:
        highlight = f"{highlights[0]}." if highlights else ""
        return profile.strong.format(highlight=highlight)
    if score >= MODERATE_BAND:
        concern = concerns[0].lower() if concerns else profile.moderate_fallback
        return profile.moderate.format(concern=concern)
    return profile.weak.format(concerns=" and ".join(c.lower() for c in concerns[:2]))


def _result(
    lens: RecruiterLens, score: float, highlights: list[str], concerns: list[str]
) -> LensResult:
    final = clamp(score)
    return LensResult(
        lens=lens,
        label=LENSES[lens].label,
        score=final,
        verdict=render_verdict(lens, final, highlights, concerns),
        highlights=tuple(highlights),
        concerns=tuple(concerns),
    )


def startup_lens(
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    readmes: Sequence[RepoReadme],
) -> LensResult:
    own = own_repositories(repositories)
    score = 0
    highlights: list[str] = []
    concerns: list[str] = []

    pushes = len(events_of(events, EventType.PUSH))
    if pushes > 10:
        score += 20
        highlights.append("High shipping velocity")
    elif pushes > 3:
        score += 10
    else:
        concerns.append("Low shipping frequency")

    deployed = sum(1 for repo in own if repo.homepage)
    if deployed >= 2:
        score += 20
        highlights.append(f"{deployed} deployed projects")
    elif deployed == 1:
        score += 10
    else:
        concerns.append("No deployed projects found")

    described = sum(1 for repo in own if repo.description and len(repo.description) > 20)
    if described >= len(own) * 0.6:
        score += 15
        highlights.append("Clear product descriptions")
    else:
        concerns.append("Most repos lack clear descriptions")

    languages = distinct_languages(own)
    if len(languages) >= 3:
        score += 15
        highlights.append(f"{len(languages)} technologies used")
    else:
        score += 5

    stars = sum(repo.stars for repo in own)
    if stars >= 20:
        score += 15
        highlights.append(f"{stars} community stars")
    elif stars >= 5:
        score += 8

    readme_avg = average_readme_score(readmes)
    if readme_avg >= 50:
        score += 15
        highlights.append("Good documentation")
    elif readme_avg >= 25:
        score += 8
    else:
        concerns.append("READMEs need improvement")

    return _result(RecruiterLens.STARTUP, score, highlights, concerns)


def enterprise_lens(
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    readmes: Sequence[RepoReadme],
) -> LensResult:
    own = own_repositories(repositories)
    score = 0
    highlights: list[str] = []
    concerns: list[str] = []

    def _has_quality_signal(repo: Repository) -> bool:
        topics = " ".join(repo.topics).lower()
        return (
            "test" in (repo.description or "").lower()
            or "test" in topics
            or "ci" in topics
            or "docker" in topics
        )

    if sum(1 for repo in own if _has_quality_signal(repo)) >= 2:
        score += 20
        highlights.append("Testing/CI signals detected")
    else:
        concerns.append("No testing or CI signals found")

    readme_avg = average_readme_score(readmes)
    if readme_avg >= 60:
        score += 20
        highlights.append("Strong documentation practices")
    elif readme_avg >= 30:
        score += 10
    else:
        concerns.append("Documentation needs significant improvement")

    if sum(1 for repo in own if repo.license) >= len(own) * 0.5:
        score += 15
        highlights.append("Proper licensing practices")
    else:
        concerns.append("Most repos lack licenses")

    if sum(1 for repo in own if len(repo.topics) >= 2) >= 3:
        score += 15
        highlights.append("Well-organized repositories")
    else:
        score += 5

    push_days = {utc_date(event.created_at) for event in events_of(events, EventType.PUSH)}
    if len(push_days) >= 10:
        score += 15
        highlights.append("Consistent commit history")
    elif len(push_days) >= 5:
        score += 8
    else:
        concerns.append("Inconsistent activity pattern")

    if len(events_of(events, EventType.PULL_REQUEST)) >= 3:
        score += 15
        highlights.append("Active PR participation")
    else:
        concerns.append("Limited PR/review activity")

    return _result(RecruiterLens.ENTERPRISE, score, highlights, concerns)


def aiml_lens(
    repositories: Sequence[Repository],
    readmes: Sequence[RepoReadme],
) -> LensResult:
    own = own_repositories(repositories)
    score = 0
    highlights: list[str] = []
    concerns: list[str] = []

    ml_repos = [
        repo
        for repo in own
        if any(kw in searchable_text(repo, include_name=True) for kw in ML_KEYWORDS)
    ]
    if len(ml_repos) >= 3:
        score += 25
        highlights.append(f"{len(ml_repos)} ML/AI repositories")
    elif ml_repos:
        score += 12
        highlights.append(f"{len(ml_repos)} ML/AI repo(s) found")
    else:
        concerns.append("No ML/AI projects detected")

    ml_language_repos = sum(1 for repo in own if repo.language in ML_LANGUAGES)
    if ml_language_repos >= 2:
        score += 20
        highlights.append("ML-focused language stack")
    elif ml_language_repos == 1:
        score += 10
    else:
        concerns.append("No Python/R/Julia projects found")

    if any("notebook" in repo.name.lower() or "jupyter" in repo.topics for repo in own):
        score += 15
        highlights.append("Jupyter notebook projects")

    if any(any(kw in searchable_text(repo) for kw in RESEARCH_KEYWORDS) for repo in own):
        score += 15
        highlights.append("Research-oriented projects")
    else:
        concerns.append("No research or paper implementations")

    if average_readme_score(readmes) >= 50:
        score += 15
        highlights.append("Well-documented experiments")
    else:
        concerns.append("Experiment documentation lacking")

    ml_stars = sum(repo.stars for repo in ml_repos)
    if ml_stars >= 10:
        score += 10
        highlights.append(f"{ml_stars} stars on ML projects")

    return _result(RecruiterLens.AIML, score, highlights, concerns)


def evaluate_lenses(
    repositories: Sequence[Repository],
    events: Sequence[ActivityEvent],
    readmes: Sequence[RepoReadme],
) -> tuple[LensResult, ...]:
    """Score every lens; results are in startup, enterprise, AI/ML order."""
    return (
        startup_lens(repositories, events, readmes),
        enterprise_lens(repositories, events, readmes),
        aiml_lens(repositories, readmes),
    )
