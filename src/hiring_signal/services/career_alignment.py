"""Career-path readiness against five fixed tracks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from hiring_signal.domain.entities import CareerAlignment, CareerPath, Repository
from hiring_signal.services.scoring_utils import clamp, own_repositories, searchable_text


@dataclass(frozen=True, slots=True)
class CareerPathConfig:
    label: str
    languages: tuple[str, ...]
    keywords: tuple[str, ...]


CAREER_PATHS: Mapping[CareerPath, CareerPathConfig] = MappingProxyType(
    {
        CareerPath.FRONTEND: CareerPathConfig(
            label="Frontend Developer",
            languages=("JavaScript", "TypeScript", "CSS", "HTML"),
            keywords=(
                "react", "vue", "angular", "svelte", "next", "nuxt", "tailwind",
                "frontend", "ui", "ux", "component", "web app",
            ),
        ),
        CareerPath.BACKEND: CareerPathConfig(
            label="Backend Developer",
            languages=("Python", "Java", "Go", "Rust", "C#", "Ruby", "TypeScript", "PHP"),
            keywords=(
                "api", "server", "database", "rest", "graphql", "microservice",
                "backend", "auth", "middleware", "queue",
            ),
        ),
        CareerPath.FULLSTACK: CareerPathConfig(
            label="Full-Stack Developer",
            languages=("JavaScript", "TypeScript", "Python", "Java", "Go"),
            keywords=(
                "fullstack", "full-stack", "webapp", "saas", "mern", "mean",
                "next", "nuxt", "deployment",
            ),
        ),
        CareerPath.DEVOPS: CareerPathConfig(
            label="DevOps Engineer",
            languages=("Python", "Go", "Shell", "HCL", "TypeScript"),
            keywords=(
                "docker", "kubernetes", "ci", "cd", "terraform", "ansible", "devops",
                "infrastructure", "pipeline", "monitoring", "deploy",
            ),
        ),
        CareerPath.ML: CareerPathConfig(
            label="ML Engineer",
            languages=("Python", "R", "Julia", "C++"),
            keywords=(
                "machine learning", "deep learning", "neural", "tensorflow", "pytorch",
                "ml", "ai", "data", "model", "training", "nlp",
            ),
        ),
    }
)


def evaluate_path(repositories: Sequence[Repository], path: CareerPath) -> CareerAlignment:
    """Readiness of the account's original work for one career path."""
    config = CAREER_PATHS[path]
    own = own_repositories(repositories)
    score = 0
    strengths: list[str] = []
    gaps: list[str] = []

    language_repos = sum(1 for repo in own if repo.language in config.languages)
    language_ratio = language_repos / len(own) if own else 0.0
    if language_ratio >= 0.5:
        score += 30
        strengths.append(f"Strong {'/'.join(config.languages[:3])} usage")
    elif language_ratio >= 0.2:
        score += 15
    else:
        gaps.append(f"Limited {'/'.join(config.languages[:2])} projects")

    matched = [
        repo
        for repo in own
        if any(kw in searchable_text(repo, include_name=True) for kw in config.keywords)
    ]
    if len(matched) >= 3:
        score += 30
        strengths.append(f"{len(matched)} relevant projects")
    elif matched:
        score += 15
        strengths.append(f"{len(matched)} relevant project(s)")
    else:
        gaps.append(f"No {config.label.lower()}-specific projects")

    relevant_stars = sum(repo.stars for repo in matched)
    if relevant_stars >= 10:
        score += 15
        strengths.append("Community-validated work")
    elif relevant_stars >= 3:
        score += 8
    else:
        gaps.append("Need more community validation")

    if len({repo.language for repo in matched if repo.language}) >= 2:
        score += 10
        strengths.append("Multi-tool approach")

    if any(repo.homepage for repo in matched):
        score += 15
        strengths.append("Deployed/live projects")
    else:
        gaps.append("No deployed projects in this domain")

    return CareerAlignment(
        path=path,
        label=config.label,
        readiness=clamp(score),
        strengths=tuple(strengths),
        gaps=tuple(gaps),
    )


def evaluate_career_paths(repositories: Sequence[Repository]) -> tuple[CareerAlignment, ...]:
    """Every path, most ready first; ties keep the declaration order.

    The first entry is flagged as the best match.
    """
    ranked = sorted(
        (evaluate_path(repositories, path) for path in CareerPath),
        key=lambda alignment: alignment.readiness,
        reverse=True,
    )
    if ranked:
        ranked[0] = dataclasses.replace(ranked[0], best_match=True)
    return tuple(ranked)
