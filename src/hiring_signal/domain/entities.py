"""Domain entities — pure data structures with no external dependencies.

Inputs describe an already-fetched snapshot of a public GitHub account;
derived values are produced once per analysis run and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EventType(str, Enum):
    """Activity event types read by the scoring core (others are ignored)."""

    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    ISSUES = "IssuesEvent"
    FORK = "ForkEvent"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecruiterLens(str, Enum):
    """Recruiter personas with independent scoring rubrics."""

    STARTUP = "startup"
    ENTERPRISE = "enterprise"
    AIML = "aiml"


class CareerPath(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DEVOPS = "devops"
    ML = "ml"


class ConfidenceLabel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class HireLabel(str, Enum):
    HIRING_READY = "Hiring Ready"
    COMPETITIVE = "Competitive"
    FOUNDATIONAL = "Foundational"
    NEEDS_WORK = "Needs Work"


# ── Inputs ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Profile:
    """Public account metadata."""

    login: str
    created_at: datetime
    updated_at: datetime
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    blog: str | None = None
    email: str | None = None
    twitter_username: str | None = None
    hireable: bool | None = None
    avatar_url: str = ""
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    public_gists: int = 0


@dataclass(frozen=True, slots=True)
class Repository:
    """A single repository owned (or forked) by the account."""

    name: str
    created_at: datetime
    pushed_at: datetime
    description: str | None = None
    homepage: str | None = None
    language: str | None = None
    stars: int = 0
    watchers: int = 0
    forks: int = 0
    open_issues: int = 0
    topics: tuple[str, ...] = ()
    has_wiki: bool = False
    has_pages: bool = False
    license: str | None = None
    size: int = 0
    fork: bool = False
    default_branch: str = "main"


@dataclass(frozen=True, slots=True)
class ActivityEvent:
    """A public activity event; ``type`` is the raw GitHub event type."""

    type: str
    created_at: datetime
    repo_name: str


@dataclass(frozen=True, slots=True)
class ReadmeSample:
    repo_name: str
    content: str


@dataclass(frozen=True, slots=True)
class TreeSample:
    repo_name: str
    paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CommitSample:
    repo_name: str
    messages: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ProfileSnapshot:
    """Everything the scoring core needs, already fetched and decoded.

    The three sample collections only cover a handful of top repositories;
    any of them may be empty.  Timestamps may carry any UTC offset; naive
    ones are treated as UTC.
    """

    profile: Profile
    repositories: tuple[Repository, ...] = ()
    events: tuple[ActivityEvent, ...] = ()
    readmes: tuple[ReadmeSample, ...] = ()
    trees: tuple[TreeSample, ...] = ()
    commits: tuple[CommitSample, ...] = ()


# ── Content analyses ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ReadmeAnalysis:
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
    missing: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RepoReadme:
    repo_name: str
    analysis: ReadmeAnalysis


@dataclass(frozen=True, slots=True)
class RepoStructureAnalysis:
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
    missing: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CommitQualityAnalysis:
    score: int
    avg_length: int
    generic_percent: int
    descriptive_percent: int
    conventional_percent: int
    total_analyzed: int
    concerns: tuple[str, ...] = ()


# ── Scores and findings ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """The nine weighted dimensions, each an integer in [0, 100]."""

    profile_completeness: int
    repository_quality: int
    commit_consistency: int
    documentation: int
    community_engagement: int
    project_diversity: int
    ownership_depth: int
    engineering_maturity: int
    impact: int


@dataclass(frozen=True, slots=True)
class Signal:
    label: str
    description: str
    severity: Severity


@dataclass(frozen=True, slots=True)
class Recommendation:
    title: str
    description: str
    impact: Impact
    category: str
    score_increase: int | None = None


@dataclass(frozen=True, slots=True)
class SimulationScenario:
    label: str
    description: str
    score_increase: int
    new_score: int


@dataclass(frozen=True, slots=True)
class LensResult:
    lens: RecruiterLens
    label: str
    score: int
    verdict: str
    highlights: tuple[str, ...] = ()
    concerns: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CareerAlignment:
    path: CareerPath
    label: str
    readiness: int
    strengths: tuple[str, ...] = ()
    gaps: tuple[str, ...] = ()
    best_match: bool = False


@dataclass(frozen=True, slots=True)
class SignalConfidence:
    score: int
    label: ConfidenceLabel
    data_coverage: int
    factors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DiscoverabilityScore:
    score: int
    bio_length: int
    has_portfolio_link: bool
    has_social_links: bool
    has_profile_readme: bool
    has_linkedin: bool
    has_pinned_showcase: bool
    demo_link_count: int
    factors: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FirstImpressionResult:
    quick_scan_score: int
    deep_dive_score: int
    quick_scan_factors: tuple[str, ...] = ()
    deep_dive_factors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RecruiterSnapshot:
    hire_readiness: int
    hire_label: HireLabel
    biggest_strength: str
    biggest_concern: str
    top_fix: str
    top_fix_increase: int


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """The final structured output of one analysis run."""

    login: str
    analyzed_at: datetime
    scores: ScoreBreakdown
    overall_score: int
    strengths: tuple[Signal, ...]
    red_flags: tuple[Signal, ...]
    recommendations: tuple[Recommendation, ...]
    language_distribution: tuple[tuple[str, int], ...]
    signal_confidence: SignalConfidence
    recruiter_lenses: tuple[LensResult, ...]
    career_alignments: tuple[CareerAlignment, ...]
    simulations: tuple[SimulationScenario, ...]
    readme_analyses: tuple[RepoReadme, ...]
    repo_structures: tuple[RepoStructureAnalysis, ...]
    commit_quality: CommitQualityAnalysis
    discoverability: DiscoverabilityScore
    first_impression: FirstImpressionResult
    recruiter_snapshot: RecruiterSnapshot
