"""Pydantic request / response DTOs for the API boundary.

Response models read straight off the domain dataclasses
(``from_attributes``), so ``AnalyzeResponse.model_validate(report)`` is the
whole mapping.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from hiring_signal.domain.entities import (
    CareerPath,
    ConfidenceLabel,
    HireLabel,
    Impact,
    RecruiterLens,
    Severity,
)


class AnalyzeRequest(BaseModel):
    """Request body for ``POST /analyze``."""

    username: str

    @field_validator("username")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "username must not be empty."
            raise ValueError(msg)
        return stripped


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ── Report sections ─────────────────────────────────────────────────────────


class ScoreBreakdownOut(_FromDomain):
    profile_completeness: int
    repository_quality: int
    commit_consistency: int
    documentation: int
    community_engagement: int
    project_diversity: int
    ownership_depth: int
    engineering_maturity: int
    impact: int


class SignalOut(_FromDomain):
    label: str
    description: str
    severity: Severity


class RecommendationOut(_FromDomain):
    title: str
    description: str
    impact: Impact
    category: str
    score_increase: int | None = None


class SimulationOut(_FromDomain):
    label: str
    description: str
    score_increase: int
    new_score: int


class LensOut(_FromDomain):
    lens: RecruiterLens
    label: str
    score: int
    verdict: str
    highlights: list[str]
    concerns: list[str]


class CareerAlignmentOut(_FromDomain):
    path: CareerPath
    label: str
    readiness: int
    strengths: list[str]
    gaps: list[str]
    best_match: bool


class SignalConfidenceOut(_FromDomain):
    score: int
    label: ConfidenceLabel
    data_coverage: int
    factors: list[str]


class ReadmeAnalysisOut(_FromDomain):
    score: int
    structural_score: int
    professional_score: int
    storytelling_score: int
    has_title: bool
    has_toc: bool
    has_installation: bool
    has_usage: bool
    has_architecture: bool
    has_screenshots: bool
    has_badges: bool
    has_contributing: bool
    has_license: bool
    has_demo_link: bool
    has_api_docs: bool
    has_impact_keywords: bool
    word_count: int
    heading_count: int
    code_block_count: int
    missing: list[str]


class RepoReadmeOut(_FromDomain):
    repo_name: str
    analysis: ReadmeAnalysisOut


class RepoStructureOut(_FromDomain):
    repo_name: str
    score: int
    has_src_dir: bool
    has_tests_dir: bool
    has_package_json: bool
    has_python_manifest: bool
    has_env_example: bool
    has_dockerfile: bool
    has_ci_workflows: bool
    has_gitignore: bool
    has_contributing: bool
    has_changelog: bool
    has_linter_config: bool
    directory_count: int
    is_modular: bool
    missing: list[str]


class CommitQualityOut(_FromDomain):
    score: int
    avg_length: int
    generic_percent: int
    descriptive_percent: int
    conventional_percent: int
    total_analyzed: int
    concerns: list[str]


class DiscoverabilityOut(_FromDomain):
    score: int
    bio_length: int
    has_portfolio_link: bool
    has_social_links: bool
    has_profile_readme: bool
    has_linkedin: bool
    has_pinned_showcase: bool
    demo_link_count: int
    factors: list[str]
    missing: list[str]


class FirstImpressionOut(_FromDomain):
    quick_scan_score: int
    deep_dive_score: int
    quick_scan_factors: list[str]
    deep_dive_factors: list[str]


class RecruiterSnapshotOut(_FromDomain):
    hire_readiness: int
    hire_label: HireLabel
    biggest_strength: str
    biggest_concern: str
    top_fix: str
    top_fix_increase: int


# ── Envelope ────────────────────────────────────────────────────────────────


class AnalyzeResponse(_FromDomain):
    """Successful response from ``POST /analyze``."""

    login: str
    analyzed_at: datetime
    scores: ScoreBreakdownOut
    overall_score: int
    strengths: list[SignalOut]
    red_flags: list[SignalOut]
    recommendations: list[RecommendationOut]
    language_distribution: dict[str, int]
    signal_confidence: SignalConfidenceOut
    recruiter_lenses: list[LensOut]
    career_alignments: list[CareerAlignmentOut]
    simulations: list[SimulationOut]
    readme_analyses: list[RepoReadmeOut]
    repo_structures: list[RepoStructureOut]
    commit_quality: CommitQualityOut
    discoverability: DiscoverabilityOut
    first_impression: FirstImpressionOut
    recruiter_snapshot: RecruiterSnapshotOut

    @field_validator("language_distribution", mode="before")
    @classmethod
    def _pairs_to_dict(cls, v: object) -> object:
        # The report stores (language, count) pairs.
        if isinstance(v, (tuple, list)):
            return dict(v)
        return v


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
