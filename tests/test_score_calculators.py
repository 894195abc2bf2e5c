from datetime import datetime, timedelta, timezone

import pytest

from builders import NOW, days_ago, make_event, make_profile, make_repo, pushes
from hiring_signal.domain.entities import ActivityEvent, EventType, ScoreBreakdown
from hiring_signal.services import score_calculators as calc

ZERO = ScoreBreakdown(*([0] * 9))


def test_weights_sum_to_one():
    assert sum(calc.WEIGHTS.values()) == pytest.approx(1.0)
    assert set(calc.WEIGHTS) == set(ScoreBreakdown.__dataclass_fields__)


def test_only_forks_zeroes_original_work_dimensions():
    repos = [make_repo("fork", fork=True, stars=100, size=5000, homepage="https://x.dev")]
    breakdown = calc.calculate_breakdown(make_profile(), repos, [], [], NOW)
    assert breakdown.repository_quality == 0
    assert breakdown.documentation == 0
    assert breakdown.project_diversity == 0
    assert breakdown.ownership_depth == 0
    assert breakdown.engineering_maturity == 0
    assert breakdown.impact == 0


def test_profile_completeness_full_and_identicon():
    full = make_profile(
        name="Mona",
        bio="Backend engineer",
        blog="https://mona.dev",
        location="Berlin",
        company="Acme",
        email="mona@example.com",
        twitter_username="mona",
        hireable=True,
        avatar_url="https://avatars.githubusercontent.com/u/1",
    )
    assert calc.profile_completeness(full) == 100
    identicon = make_profile(name="Mona", avatar_url="https://github.com/identicons/mona.png")
    assert calc.profile_completeness(identicon) == 20


def test_commit_consistency_without_pushes_has_floor():
    issues = [make_event(EventType.ISSUES)]
    assert calc.commit_consistency(issues, NOW) == calc.NO_ACTIVITY_FLOOR


def test_commit_consistency_recent_streak_rounds_half_up():
    # 5 active days (20) + 5 pushes (7.5) + pushed this week (20) = 47.5
    assert calc.commit_consistency(pushes(5), NOW) == 48


def test_commit_consistency_ignores_supplied_order():
    events = pushes(5)
    assert calc.commit_consistency(list(reversed(events)), NOW) == 48


def test_commit_consistency_stale_push():
    assert calc.commit_consistency([make_event(EventType.PUSH, 45)], NOW) == 6


def test_commit_consistency_counts_utc_days():
    # 23:30 at -02:00 on May 31st is 01:30 UTC on June 1st
    late_evening = datetime(2025, 5, 31, 23, 30, tzinfo=timezone(timedelta(hours=-2)))
    events = [
        ActivityEvent(EventType.PUSH.value, late_evening, "octocat/project"),
        ActivityEvent(EventType.PUSH.value, datetime(2025, 6, 1, 5, 0, tzinfo=timezone.utc), "octocat/project"),
    ]
    # 1 active day (4) + 2 pushes (3) + pushed this week (20)
    assert calc.commit_consistency(events, NOW) == 27


def test_naive_timestamps_are_read_as_utc():
    naive = ActivityEvent(EventType.PUSH.value, datetime(2025, 6, 1, 5, 0), "octocat/project")
    aware = make_event(EventType.PUSH, 3)
    # 2 active days (8) + 2 pushes (3) + pushed this week (20)
    assert calc.commit_consistency([naive, aware], NOW) == 31
    assert calc.commit_consistency([naive, aware], NOW.replace(tzinfo=None)) == 31

    old_repo = make_repo(created_at=datetime(2023, 1, 1), size=0)
    assert calc.ownership_depth([old_repo], [], NOW) == 5


def test_repository_quality_single_polished_repo():
    repo = make_repo(
        stars=5,
        description="A useful command line tool",
        topics=("cli",),
        license="mit",
        homepage="https://tool.dev",
    )
    assert calc.repository_quality([repo]) == 73


def test_documentation_without_readmes():
    assert calc.documentation([make_repo()], []) == 0


def test_community_engagement_caps():
    profile = make_profile(followers=20, public_gists=10)
    events = (
        [make_event(EventType.PULL_REQUEST)] * 5
        + [make_event(EventType.ISSUES)] * 5
        + [make_event(EventType.FORK)] * 5
    )
    assert calc.community_engagement(profile, events) == 100


def test_project_diversity():
    repos = [
        make_repo("a", language="Python", topics=("a",)),
        make_repo("b", language="Go", topics=("b",)),
        make_repo("c", language="Rust"),
    ]
    assert calc.project_diversity(repos) == 51


def test_ownership_depth():
    repo = make_repo(
        size=600,
        created_at=days_ago(365),
        description="A long-running service that ingests and normalises billing events",
    )
    events = pushes(3, repo_name="octocat/project")
    assert calc.ownership_depth([repo], events, NOW) == 26


def test_engineering_maturity():
    repo = make_repo(
        topics=("docker", "testing", "api"), has_wiki=True, has_pages=True, license="mit"
    )
    assert calc.engineering_maturity([repo]) == 38


def test_impact():
    repo = make_repo(stars=10, forks=2, homepage="https://x.dev", open_issues=1, watchers=4)
    assert calc.impact([repo]) == 50


def test_overall_score_weighting():
    assert calc.overall_score(ZERO) == 0
    assert calc.overall_score(ScoreBreakdown(*([100] * 9))) == 100
    assert calc.overall_score(ScoreBreakdown(100, 0, 0, 0, 0, 0, 0, 0, 0)) == 10
    assert calc.overall_score(ScoreBreakdown(0, 100, 0, 100, 0, 0, 0, 0, 0)) == 30


def test_empty_inputs_stay_in_bounds():
    breakdown = calc.calculate_breakdown(make_profile(), [], [], [], NOW)
    assert breakdown == ScoreBreakdown(0, 0, calc.NO_ACTIVITY_FLOOR, 0, 0, 0, 0, 0, 0)
