"""Tests for the pure analysis pipeline."""

import dataclasses

import pytest

from builders import NOW, make_event, make_profile, make_repo, pushes
from hiring_signal.domain.entities import (
    CommitSample,
    EventType,
    ProfileSnapshot,
    ReadmeSample,
    TreeSample,
)
from hiring_signal.services.analyze_profile import analyze_profile
from hiring_signal.services.readme_analyzer import analyze_readmes
from hiring_signal.services.score_calculators import WEIGHTS, calculate_breakdown
from hiring_signal.services.scoring_utils import clamp

PROFILE = make_profile(
    name="Mona Lisa",
    bio="Backend engineer building data pipelines and developer tools.",
    blog="https://mona.dev",
    location="Berlin",
    followers=14,
    avatar_url="https://avatars.githubusercontent.com/u/1",
)

REPOS = (
    make_repo("pipeline", language="Python", stars=12, forks=3, size=4000, license="mit",
              description="Streaming ETL pipeline for billing events with exactly-once delivery",
              topics=("etl", "kafka", "docker"), homepage="https://pipeline.dev"),
    make_repo("cli", language="Go", stars=4, size=800, license="apache-2.0",
              description="Command line client for the billing API",
              topics=("cli", "testing")),
    make_repo("site", language="TypeScript", stars=1, size=300,
              description="Personal site", topics=("nextjs",)),
    make_repo("dotfiles", fork=True, stars=0),
)

EVENTS = tuple(
    pushes(12, repo_name="mona/pipeline")
    + [make_event(EventType.PULL_REQUEST, 3), make_event(EventType.ISSUES, 4)]
)

README = """# Pipeline
## Installation
pip install pipeline
## Usage
```
python -m pipeline run
```
"""

STRUCTURE = ("src/main.py", "tests/test_main.py", ".github/workflows/ci.yml", ".gitignore", "Dockerfile")

COMMITS = (
    "feat: add exactly-once delivery to the kafka sink",
    "fix: handle rebalance during offset commit",
    "docs: explain the retry configuration",
)

SNAPSHOT = ProfileSnapshot(
    profile=PROFILE,
    repositories=REPOS,
    events=EVENTS,
    readmes=(ReadmeSample("pipeline", README),),
    trees=(TreeSample("pipeline", STRUCTURE),),
    commits=(CommitSample("pipeline", COMMITS),),
)


def test_scores_bounded_and_overall_is_weighted_sum():
    report = analyze_profile(SNAPSHOT, now=NOW)
    values = dataclasses.asdict(report.scores)
    assert all(0 <= v <= 100 for v in values.values())
    expected = clamp(sum(values[name] * weight for name, weight in WEIGHTS.items()))
    assert report.overall_score == expected


def test_structure_and_commit_blending():
    report = analyze_profile(SNAPSHOT, now=NOW)
    raw = calculate_breakdown(
        PROFILE, REPOS, EVENTS, analyze_readmes(SNAPSHOT.readmes), NOW
    )
    structure_score = report.repo_structures[0].score
    assert structure_score == 70
    assert report.scores.engineering_maturity == clamp(
        raw.engineering_maturity * 0.5 + structure_score * 0.5
    )
    assert report.scores.commit_consistency == clamp(
        raw.commit_consistency * 0.7 + report.commit_quality.score * 0.3
    )
    assert report.scores.documentation == raw.documentation


def test_no_samples_means_no_blending():
    snapshot = dataclasses.replace(SNAPSHOT, readmes=(), trees=(), commits=())
    report = analyze_profile(snapshot, now=NOW)
    assert report.scores == calculate_breakdown(PROFILE, REPOS, EVENTS, (), NOW)
    assert report.commit_quality.concerns == ("No commit data available",)
    assert report.repo_structures == ()
    assert report.readme_analyses == ()


def test_report_sections_are_consistent():
    report = analyze_profile(SNAPSHOT, now=NOW)
    assert report.login == "octocat"
    assert report.analyzed_at == NOW
    assert len(report.recruiter_lenses) == 3
    assert len(report.career_alignments) == 5
    assert report.career_alignments[0].best_match
    assert len(report.simulations) <= 5
    assert all(s.new_score == min(100, report.overall_score + s.score_increase)
               for s in report.simulations)
    gains = [r.score_increase or 0 for r in report.recommendations]
    assert gains == sorted(gains, reverse=True)
    assert dict(report.language_distribution) == {"Python": 1, "Go": 1, "TypeScript": 1}
    assert report.first_impression.deep_dive_score == report.overall_score
    assert report.recruiter_snapshot.hire_readiness == report.overall_score
    assert report.recruiter_snapshot.top_fix == report.recommendations[0].title


def test_idempotent_for_same_inputs_and_now():
    first = analyze_profile(SNAPSHOT, now=NOW)
    second = analyze_profile(SNAPSHOT, now=NOW)
    assert first == second
    assert repr(first) == repr(second)


def test_minimal_snapshot_degrades_gracefully():
    report = analyze_profile(ProfileSnapshot(profile=make_profile()), now=NOW)
    assert report.overall_score >= 0
    assert report.scores.repository_quality == 0
    assert report.commit_quality.total_analyzed == 0
    assert report.language_distribution == ()
    assert report.recommendations


def test_report_is_hashable_and_read_only():
    report = analyze_profile(SNAPSHOT, now=NOW)
    assert hash(report) == hash(analyze_profile(SNAPSHOT, now=NOW))
    with pytest.raises(TypeError):
        report.language_distribution["Injected"] = 99
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.language_distribution = ()


def test_naive_now_and_timestamps_match_utc():
    naive_snapshot = dataclasses.replace(
        SNAPSHOT,
        repositories=tuple(
            dataclasses.replace(r, created_at=r.created_at.replace(tzinfo=None)) for r in REPOS
        ),
        events=tuple(
            dataclasses.replace(e, created_at=e.created_at.replace(tzinfo=None)) for e in EVENTS
        ),
    )
    naive_report = analyze_profile(naive_snapshot, now=NOW.replace(tzinfo=None))
    report = analyze_profile(SNAPSHOT, now=NOW)
    assert naive_report.analyzed_at == NOW
    assert naive_report.scores == report.scores
    assert naive_report.overall_score == report.overall_score
