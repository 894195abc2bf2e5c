import pytest

from hiring_signal.domain.entities import CommitSample
from hiring_signal.services.commit_analyzer import NO_DATA_CONCERN, analyze_commits

CONVENTIONAL = (
    "feat(api): add pagination to the repository listing endpoint",
    "fix: handle empty tree responses from the GitHub API\n\nGitHub returns 409 for empty repos.",
    "refactor: extract scoring helpers into a shared module",
    "docs: document the configuration environment variables",
)


def test_no_commits():
    result = analyze_commits([])
    assert result.score == 0
    assert result.total_analyzed == 0
    assert result.concerns == (NO_DATA_CONCERN,)


def test_samples_without_messages_count_as_no_data():
    result = analyze_commits([CommitSample("repo", ())])
    assert result.total_analyzed == 0
    assert result.concerns == ("No commit data available",)


def test_generic_messages():
    result = analyze_commits([CommitSample("repo", ("update", "fix", "wip", "stuff"))])
    assert result.generic_percent == 100
    assert result.conventional_percent == 0
    assert result.descriptive_percent == 0
    assert result.avg_length == 4
    assert result.score == 15
    assert result.concerns == (
        "100% of commits have generic messages",
        "Average message length is only 4 chars",
        "No conventional commit format used",
        "Few commits use descriptive action verbs",
    )


def test_conventional_messages_score_full_marks():
    result = analyze_commits([CommitSample("repo", CONVENTIONAL)])
    assert result.total_analyzed == 4
    assert result.conventional_percent == 100
    assert result.descriptive_percent == 50
    assert result.generic_percent == 0
    assert result.score == 100
    assert result.concerns == ()


def test_only_first_line_is_classified():
    result = analyze_commits([CommitSample("repo", ("wip\n\nlong explanation of the change",))])
    assert result.generic_percent == 100
    assert result.avg_length == 3


def test_samples_are_pooled():
    result = analyze_commits(
        [CommitSample("a", CONVENTIONAL[:2]), CommitSample("b", CONVENTIONAL[2:])]
    )
    assert result.total_analyzed == 4


@pytest.mark.parametrize(
    ("generic_count", "generic_percent", "score"),
    [
        # 10% generic stays in the top band, 30% in the second
        (1, 10, 80),
        (3, 30, 70),
    ],
)
def test_generic_share_band_edges(generic_count, generic_percent, score):
    feature = "feat: add pagination to the repository listing endpoint"
    messages = ("wip",) * generic_count + (feature,) * (10 - generic_count)
    result = analyze_commits([CommitSample("repo", messages)])
    assert result.generic_percent == generic_percent
    assert result.descriptive_percent == 0
    assert result.score == score
