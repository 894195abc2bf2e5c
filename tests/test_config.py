from hiring_signal.infrastructure.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    settings = Settings(_env_file=None)
    assert settings.github_token is None
    assert settings.readme_sample_size == 5
    assert settings.tree_sample_size == 3
    assert settings.commit_sample_size == 30
    assert settings.max_concurrent_requests == 10


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_example")
    monkeypatch.setenv("README_SAMPLE_SIZE", "8")
    settings = Settings(_env_file=None)
    assert settings.github_token.get_secret_value() == "ghp_example"
    assert settings.readme_sample_size == 8


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("TREE_SAMPLE_SIZE", "4")
    first = get_settings()
    assert first is get_settings()
    assert first.tree_sample_size == 4
