"""Analyze-profile pipeline — the pure scoring core and its fetch use case.

:func:`analyze_profile` is a single synchronous computation over an
already-fetched :class:`ProfileSnapshot`: no I/O, no shared state, and the
only clock it reads is the injectable ``now``.  :class:`AnalyzeProfileUseCase`
gathers the snapshot through the :class:`ProfileFetcher` port and then
hands it to the core.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Sequence, TypeVar

from hiring_signal.domain.entities import (
    AnalysisReport,
    CommitQualityAnalysis,
    CommitSample,
    ProfileSnapshot,
    ReadmeSample,
    RepoStructureAnalysis,
    Repository,
    ScoreBreakdown,
    TreeSample,
)
from hiring_signal.domain.ports.profile_fetcher import ProfileFetcher
from hiring_signal.domain.value_objects import GitHubHandle
from hiring_signal.services.career_alignment import evaluate_career_paths
from hiring_signal.services.commit_analyzer import analyze_commits
from hiring_signal.services.readme_analyzer import analyze_readmes
from hiring_signal.services.recommendations import plan_recommendations, project_simulations
from hiring_signal.services.recruiter_lenses import evaluate_lenses
from hiring_signal.services.score_calculators import calculate_breakdown, overall_score
from hiring_signal.services.scoring_utils import as_utc, clamp, own_repositories
from hiring_signal.services.signal_detector import identify_red_flags, identify_strengths
from hiring_signal.services.structure_analyzer import analyze_structures
from hiring_signal.services.visibility import (
    discoverability,
    first_impression,
    language_distribution,
    recruiter_snapshot,
    signal_confidence,
)

logger = logging.getLogger(__name__)

STRUCTURE_BLEND = 0.5
COMMIT_QUALITY_BLEND = 0.3

_T = TypeVar("_T")


# ── Cross-dimension blending ────────────────────────────────────────────────


def blend_scores(
    raw: ScoreBreakdown,
    structures: Sequence[RepoStructureAnalysis],
    commit_quality: CommitQualityAnalysis,
) -> ScoreBreakdown:
    """Refine two dimensions with the deeper evidence of the content analyzers.

    Engineering maturity becomes a 50/50 mix with the mean structure score
    and commit consistency a 70/30 mix with the commit-quality score, each
    only when that evidence exists.
    """
    blended = raw
    if structures:
        avg_structure = sum(s.score for s in structures) / len(structures)
        blended = dataclasses.replace(
            blended,
            engineering_maturity=clamp(
                blended.engineering_maturity * (1 - STRUCTURE_BLEND)
                + avg_structure * STRUCTURE_BLEND
            ),
        )
    if commit_quality.total_analyzed > 0:
        blended = dataclasses.replace(
            blended,
            commit_consistency=clamp(
                blended.commit_consistency * (1 - COMMIT_QUALITY_BLEND)
                + commit_quality.score * COMMIT_QUALITY_BLEND
            ),
        )
    return blended


# ── Pure core ───────────────────────────────────────────────────────────────


def analyze_profile(snapshot: ProfileSnapshot, *, now: datetime | None = None) -> AnalysisReport:
    """Turn a fetched snapshot into the full hiring-signal report.

    Parameters
    ----------
    snapshot:
        Profile, repositories, events and the optional content samples.
    now:
        Reference time for every recency rule.  Defaults to the current UTC
        time; pass it explicitly for reproducible output.  A naive value is
        read as UTC, like naive timestamps inside the snapshot.
    """
    now = datetime.now(timezone.utc) if now is None else as_utc(now)
    profile = snapshot.profile
    repos = snapshot.repositories
    events = snapshot.events

    # 1. Content analyzers
    readmes = analyze_readmes(snapshot.readmes)
    structures = analyze_structures(snapshot.trees)
    commit_quality = analyze_commits(snapshot.commits)

    # 2. Dimension scores, then blending
    raw = calculate_breakdown(profile, repos, events, readmes, now)
    scores = blend_scores(raw, structures, commit_quality)
    overall = overall_score(scores)
    logger.debug("Scores for %s: %s (overall %d)", profile.login, scores, overall)

    # 3. Everything that reads the final breakdown or the raw inputs
    recommendations = plan_recommendations(profile, repos, scores, readmes)

    report = AnalysisReport(
        login=profile.login,
        analyzed_at=now,
        scores=scores,
        overall_score=overall,
        strengths=identify_strengths(profile, repos, events, now),
        red_flags=identify_red_flags(profile, repos, events, now),
        recommendations=recommendations,
        language_distribution=language_distribution(repos),
        signal_confidence=signal_confidence(profile, repos, events, readmes),
        recruiter_lenses=evaluate_lenses(repos, events, readmes),
        career_alignments=evaluate_career_paths(repos),
        simulations=project_simulations(scores, overall),
        readme_analyses=readmes,
        repo_structures=structures,
        commit_quality=commit_quality,
        discoverability=discoverability(profile, repos),
        first_impression=first_impression(profile, repos, readmes, overall),
        recruiter_snapshot=recruiter_snapshot(overall, scores, recommendations),
    )
    logger.info("Analysed %s: overall score %d", profile.login, overall)
    return report


# ── Use case ────────────────────────────────────────────────────────────────


class AnalyzeProfileUseCase:
    """Fetches a profile snapshot and runs the scoring core over it.

    Parameters
    ----------
    fetcher:
        Adapter that can fetch account data from GitHub.
    readme_sample_size:
        Number of top repositories (by stars) whose README is analysed.
    tree_sample_size:
        Number of top repositories whose file tree and commits are analysed.
    max_concurrent_requests:
        Upper bound on in-flight sample requests.
    clock:
        Source of the reference time handed to :func:`analyze_profile`.
    """

    def __init__(
        self,
        fetcher: ProfileFetcher,
        readme_sample_size: int = 5,
        tree_sample_size: int = 3,
        max_concurrent_requests: int = 10,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._readme_size = readme_sample_size
        self._tree_size = tree_sample_size
        self._max_concurrent = max_concurrent_requests
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, username: str) -> AnalysisReport:
        """Fetch everything for *username* and return the report."""
        handle = GitHubHandle.from_string(username)
        logger.info("Analysing GitHub profile %s", handle.profile_url)

        # 1. Profile, repositories and events in parallel
        profile, repositories, events = await asyncio.gather(
            self._fetcher.fetch_profile(handle),
            self._fetcher.fetch_repositories(handle),
            self._fetcher.fetch_events(handle),
        )

        # 2. Content samples for the top repositories
        top = self._top_repositories(repositories)
        readmes, trees, commits = await self._fetch_samples(handle, top)
        logger.info(
            "Sampled %d README(s), %d tree(s), %d commit log(s) for %s",
            len(readmes),
            len(trees),
            len(commits),
            handle.login,
        )

        snapshot = ProfileSnapshot(
            profile=profile,
            repositories=tuple(repositories),
            events=tuple(events),
            readmes=readmes,
            trees=trees,
            commits=commits,
        )
        return analyze_profile(snapshot, now=self._clock())

    # ── Sampling ────────────────────────────────────────────────────────

    def _top_repositories(self, repositories: Sequence[Repository]) -> list[Repository]:
        """Original repositories ordered by stars, capped at the README sample size."""
        own = sorted(own_repositories(repositories), key=lambda r: r.stars, reverse=True)
        return own[: self._readme_size]

    async def _fetch_samples(
        self, handle: GitHubHandle, top: list[Repository]
    ) -> tuple[tuple[ReadmeSample, ...], tuple[TreeSample, ...], tuple[CommitSample, ...]]:
        """Fetch README, tree and commit samples concurrently; failures are dropped."""
        sem = asyncio.Semaphore(self._max_concurrent)

        async def _guarded(label: str, call: Awaitable[_T]) -> _T | None:
            async with sem:
                try:
                    return await call
                except Exception:
                    logger.debug("Failed to fetch %s; skipping", label, exc_info=True)
                    return None

        deep = top[: self._tree_size]
        readme_texts, tree_paths, messages = await asyncio.gather(
            asyncio.gather(
                *(_guarded(f"README of {r.name}", self._fetcher.fetch_readme(handle, r.name)) for r in top)
            ),
            asyncio.gather(
                *(
                    _guarded(
                        f"tree of {r.name}",
                        self._fetcher.fetch_tree(handle, r.name, r.default_branch),
                    )
                    for r in deep
                )
            ),
            asyncio.gather(
                *(
                    _guarded(f"commits of {r.name}", self._fetcher.fetch_commit_messages(handle, r.name))
                    for r in deep
                )
            ),
        )

        readmes = tuple(
            ReadmeSample(repo_name=repo.name, content=text)
            for repo, text in zip(top, readme_texts)
            if text is not None
        )
        trees = tuple(
            TreeSample(repo_name=repo.name, paths=tuple(paths))
            for repo, paths in zip(deep, tree_paths)
            if paths is not None
        )
        commits = tuple(
            CommitSample(repo_name=repo.name, messages=tuple(msgs))
            for repo, msgs in zip(deep, messages)
            if msgs is not None
        )
        return readmes, trees, commits
