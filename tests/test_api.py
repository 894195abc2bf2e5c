from fastapi.testclient import TestClient

from builders import NOW, FakeFetcher, make_profile, make_repo
from hiring_signal.domain.exceptions import GitHubRateLimitError, ProfileNotFoundError
from hiring_signal.interface.app import create_app
from hiring_signal.interface.dependencies import get_use_case
from hiring_signal.services.analyze_profile import AnalyzeProfileUseCase


def _client(fetcher: FakeFetcher) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: AnalyzeProfileUseCase(
        fetcher, clock=lambda: NOW
    )
    return TestClient(app, raise_server_exceptions=False)


FETCHER = FakeFetcher(
    profile=make_profile(name="Mona", bio="Engineer"),
    repositories=[make_repo("tool", language="Go", stars=3)],
    readmes={"tool": "# Tool\n\n## Usage\n\ngo run ."},
)


def test_health():
    response = _client(FETCHER).get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze():
    response = _client(FETCHER).post("/analyze", json={"username": "octocat"})
    assert response.status_code == 200
    data = response.json()
    assert data["login"] == "octocat"
    assert 0 <= data["overall_score"] <= 100
    assert set(data["scores"]) == {
        "profile_completeness",
        "repository_quality",
        "commit_consistency",
        "documentation",
        "community_engagement",
        "project_diversity",
        "ownership_depth",
        "engineering_maturity",
        "impact",
    }
    assert data["language_distribution"] == {"Go": 1}
    assert [lens["lens"] for lens in data["recruiter_lenses"]] == ["startup", "enterprise", "aiml"]
    assert len(data["career_alignments"]) == 5
    assert data["readme_analyses"][0]["repo_name"] == "tool"
    assert data["recruiter_snapshot"]["hire_label"] in (
        "Hiring Ready",
        "Competitive",
        "Foundational",
        "Needs Work",
    )
    assert data["analyzed_at"].startswith("2025-06-01T12:00:00")


def test_blank_username_is_rejected():
    response = _client(FETCHER).post("/analyze", json={"username": "   "})
    assert response.status_code == 422
    assert response.json()["status"] == "error"


def test_invalid_handle():
    response = _client(FETCHER).post("/analyze", json={"username": "bad handle!"})
    assert response.status_code == 422
    assert "Invalid GitHub username" in response.json()["message"]


def test_unknown_user_maps_to_404():
    fetcher = FakeFetcher(profile_error=ProfileNotFoundError("GitHub user 'ghost' not found."))
    response = _client(fetcher).post("/analyze", json={"username": "ghost"})
    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "GitHub user 'ghost' not found."}


def test_rate_limit_maps_to_429():
    fetcher = FakeFetcher(profile_error=GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429)."))
    response = _client(fetcher).post("/analyze", json={"username": "octocat"})
    assert response.status_code == 429
