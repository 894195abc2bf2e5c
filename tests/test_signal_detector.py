from builders import NOW, make_event, make_profile, make_repo, pushes
from hiring_signal.domain.entities import EventType, Severity
from hiring_signal.services.signal_detector import identify_red_flags, identify_strengths


def _labels(signals):
    return [signal.label for signal in signals]


def test_bare_account_red_flags():
    flags = identify_red_flags(make_profile(), [], [], NOW)
    assert _labels(flags) == [
        "Missing Bio",
        "No Display Name",
        "No Recent Activity",
        "Few Original Projects",
    ]
    assert flags[-1].description == "Only 0 non-forked repos"


def test_bare_account_has_no_strengths():
    assert identify_strengths(make_profile(), [], [], NOW) == ()


def test_fork_heavy_profile():
    repos = [make_repo("own", description="An original project")] + [
        make_repo(f"fork{i}", fork=True) for i in range(9)
    ]
    flags = identify_red_flags(make_profile(), repos, [], NOW)
    fork_flag = next(f for f in flags if f.label == "Fork Heavy Profile")
    assert fork_flag.description.startswith("90% of repos are forks")
    assert fork_flag.severity is Severity.HIGH


def test_extended_inactivity():
    flags = identify_red_flags(make_profile(), [], [make_event(EventType.PUSH, 120)], NOW)
    inactivity = next(f for f in flags if f.label == "Extended Inactivity")
    assert inactivity.description == "Last commit was 120 days ago"
    assert "No Recent Activity" not in _labels(flags)


def test_tutorial_heavy_portfolio():
    repos = [make_repo(f"learn-react-{i}") for i in range(3)] + [make_repo("service")]
    assert "Tutorial-Heavy Portfolio" in _labels(identify_red_flags(make_profile(), repos, [], NOW))


def test_strengths_for_established_account():
    profile = make_profile(name="Mona", bio="Builds things", blog="https://mona.dev", followers=25)
    repos = [
        make_repo("api", language="Go", stars=8, forks=3, license="mit", size=2000, topics=("docker",)),
        make_repo("web", language="TypeScript", stars=4, forks=2, license="mit", size=1500, topics=("ci",)),
        make_repo("ml", language="Python", license="apache-2.0"),
    ]
    strengths = identify_strengths(profile, repos, pushes(3), NOW)
    assert _labels(strengths) == [
        "Star Power",
        "Growing Network",
        "Professional Profile",
        "Polyglot Developer",
        "Active Contributor",
        "Open Source Mindset",
        "Engineering Practices",
        "Deep Contributor",
        "Community Impact",
    ]
    assert strengths[0].description == "12 total stars, validated by the community"


def test_forks_do_not_count_towards_stars():
    repos = [make_repo("fork", fork=True, stars=500)]
    assert "Star Power" not in _labels(identify_strengths(make_profile(), repos, [], NOW))
