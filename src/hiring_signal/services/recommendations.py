"""Recommendation planner and before/after simulation projector.

Both read the (blended) score breakdown and evaluate fixed threshold rules
in order.  Sorting is stable, so rules with equal deltas keep their
evaluation order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from hiring_signal.domain.entities import (
    Impact,
    Profile,
    Recommendation,
    RepoReadme,
    Repository,
    ScoreBreakdown,
    SimulationScenario,
)
from hiring_signal.services.scoring_utils import average_readme_score, own_repositories

MAX_SIMULATIONS = 5


def plan_recommendations(
    profile: Profile,
    repositories: Sequence[Repository],
    scores: ScoreBreakdown,
    readmes: Sequence[RepoReadme],
) -> tuple[Recommendation, ...]:
    """Ranked improvement actions with their predicted score gains."""
    recs: list[Recommendation] = []

    if scores.profile_completeness < 70:
        if not profile.bio:
            recs.append(
                Recommendation(
                    "Add a Professional Bio",
                    "Write 1-2 sentences about your expertise. Recruiters scan bios first.",
                    Impact.HIGH,
                    "Profile",
                    6,
                )
            )
        if not profile.blog:
            recs.append(
                Recommendation(
                    "Link Your Portfolio/Website",
                    "Add a personal site or LinkedIn URL for more context.",
                    Impact.MEDIUM,
                    "Profile",
                    4,
                )
            )

    if scores.repository_quality < 60:
        recs.append(
            Recommendation(
                "Pin Your Best Repositories",
                "Select 4-6 repos that showcase your strongest work. "
                "Add detailed descriptions and demo links.",
                Impact.HIGH,
                "Repositories",
                8,
            )
        )

    if scores.documentation < 50:
        recs.append(
            Recommendation(
                "Write Better READMEs",
                "Add screenshots, setup instructions, tech stack, and project purpose. "
                "Include architecture diagrams and deployment instructions.",
                Impact.HIGH,
                "Documentation",
                9,
            )
        )
        untagged = sum(1 for repo in own_repositories(repositories) if not repo.topics)
        if untagged:
            recs.append(
                Recommendation(
                    "Add Topic Tags",
                    f"{untagged} repos lack topics. Add 3-5 relevant tags for discoverability.",
                    Impact.MEDIUM,
                    "Documentation",
                    4,
                )
            )

    if scores.commit_consistency < 50:
        recs.append(
            Recommendation(
                "Build a Commit Streak",
                "Aim for 3-4 commits per week. Consistent activity signals dedication.",
                Impact.HIGH,
                "Activity",
                7,
            )
        )

    if scores.community_engagement < 40:
        recs.append(
            Recommendation(
                "Contribute to Open Source",
                "Submit PRs to projects you use. Even docs fixes show collaboration.",
                Impact.MEDIUM,
                "Community",
                5,
            )
        )

    if scores.engineering_maturity < 40:
        recs.append(
            Recommendation(
                "Add Tests & CI/CD",
                "Add testing frameworks and GitHub Actions to your top 3 repos. "
                "Shows engineering rigor.",
                Impact.HIGH,
                "Engineering",
                8,
            )
        )

    if scores.ownership_depth < 40:
        recs.append(
            Recommendation(
                "Deepen Project Ownership",
                "Focus on 2-3 projects with sustained commits over months. "
                "Deep work beats breadth.",
                Impact.HIGH,
                "Ownership",
                7,
            )
        )

    if readmes and average_readme_score(readmes) < 50:
        top_missing = ", ".join(readmes[0].analysis.missing[:3])
        recs.append(
            Recommendation(
                "Enhance README Quality",
                f"Your top repos are missing: {top_missing}. "
                "Adding these will dramatically improve recruiter impression.",
                Impact.HIGH,
                "Documentation",
                9,
            )
        )

    if not recs:
        recs.append(
            Recommendation(
                "Maintain Your Momentum",
                "Your profile is strong! Keep shipping and documenting. "
                "Consider writing technical blog posts.",
                Impact.LOW,
                "Growth",
                2,
            )
        )

    return tuple(sorted(recs, key=lambda rec: rec.score_increase or 0, reverse=True))


# ── Simulations ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _SimulationRule:
    applies: Callable[[ScoreBreakdown], bool]
    label: str
    description: str
    delta: int


SIMULATION_RULES: tuple[_SimulationRule, ...] = (
    _SimulationRule(
        lambda s: s.documentation < 60,
        "Add READMEs to top 3 repos",
        "Add screenshots, setup instructions, and architecture docs",
        9,
    ),
    _SimulationRule(
        lambda s: s.engineering_maturity < 50,
        "Add tests to 3 major repos",
        "Add testing frameworks and CI/CD pipelines",
        8,
    ),
    _SimulationRule(
        lambda s: s.commit_consistency < 50,
        "Commit daily for 2 weeks",
        "Build a consistent commit streak to show dedication",
        7,
    ),
    _SimulationRule(
        lambda s: s.profile_completeness < 70,
        "Complete your profile",
        "Add bio, website, company, and location",
        5,
    ),
    _SimulationRule(
        lambda s: s.ownership_depth < 50,
        "Deep-dive into 2 projects",
        "Add 20+ commits over 3 months to show ownership",
        7,
    ),
    _SimulationRule(
        lambda s: s.community_engagement < 40,
        "Submit 5 open-source PRs",
        "Contribute to projects you use daily",
        5,
    ),
)


def project_simulations(
    scores: ScoreBreakdown, overall_score: int
) -> tuple[SimulationScenario, ...]:
    """Up to five "if you did X" projections, largest gain first."""
    scenarios = [
        SimulationScenario(
            label=rule.label,
            description=rule.description,
            score_increase=rule.delta,
            new_score=min(100, overall_score + rule.delta),
        )
        for rule in SIMULATION_RULES
        if rule.applies(scores)
    ]
    scenarios.sort(key=lambda scenario: scenario.score_increase, reverse=True)
    return tuple(scenarios[:MAX_SIMULATIONS])
