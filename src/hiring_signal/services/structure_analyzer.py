"""Repository structure analysis — which engineering scaffolding a tree has."""

from __future__ import annotations

from typing import Iterable, Sequence

from hiring_signal.domain.entities import RepoStructureAnalysis, TreeSample
from hiring_signal.services.scoring_utils import clamp

# ── Path vocabularies (lower-case) ──────────────────────────────────────────

SRC_PREFIXES: tuple[str, ...] = ("src/", "lib/", "app/")
TEST_PREFIXES: tuple[str, ...] = ("test/", "tests/", "__tests__/", "spec/")
TEST_INFIXES: tuple[str, ...] = (".test.", ".spec.")
PYTHON_MANIFESTS: frozenset[str] = frozenset(
    {"requirements.txt", "pyproject.toml", "setup.py", "pipfile"}
)
ENV_SAMPLES: frozenset[str] = frozenset({".env.example", ".env.sample", ".env.template"})
CONTRIBUTING_FILES: frozenset[str] = frozenset({"contributing.md", "contributing"})
CHANGELOG_FILES: frozenset[str] = frozenset({"changelog.md", "changelog", "history.md"})
LINTER_FILES: frozenset[str] = frozenset({".editorconfig", ".prettierrc"})
CI_PREFIX = ".github/workflows/"

_MODULAR_MIN_DIRS = 3


def _top_level_dirs(paths: Sequence[str]) -> set[str]:
    return {path.split("/", maxsplit=1)[0] for path in paths if "/" in path}


def analyze_structure(repo_name: str, paths: Iterable[str]) -> RepoStructureAnalysis:
    """Score the file listing of one repository."""
    lowered = [path.lower() for path in paths]
    present = set(lowered)

    has_src_dir = any(p.startswith(SRC_PREFIXES) for p in lowered)
    has_tests_dir = any(
        p.startswith(TEST_PREFIXES) or any(infix in p for infix in TEST_INFIXES)
        for p in lowered
    )
    has_package_json = "package.json" in present
    has_python_manifest = bool(present & PYTHON_MANIFESTS)
    has_env_example = bool(present & ENV_SAMPLES)
    has_dockerfile = any(p == "dockerfile" or p.startswith("docker-compose") for p in lowered)
    has_ci_workflows = any(p.startswith(CI_PREFIX) for p in lowered)
    has_gitignore = ".gitignore" in present
    has_contributing = bool(present & CONTRIBUTING_FILES)
    has_changelog = bool(present & CHANGELOG_FILES)
    has_linter_config = bool(present & LINTER_FILES) or any("eslint" in p for p in lowered)

    directory_count = len(_top_level_dirs(lowered))
    is_modular = directory_count >= _MODULAR_MIN_DIRS

    grants: list[tuple[bool, int]] = [
        (has_src_dir, 15),
        (has_tests_dir, 15),
        (has_package_json or has_python_manifest, 10),
        (has_env_example, 10),
        (has_dockerfile, 10),
        (has_ci_workflows, 15),
        (has_gitignore, 5),
        (has_contributing, 5),
        (has_linter_config, 5),
        (is_modular, 10),
    ]
    score = clamp(sum(points for ok, points in grants if ok))

    checklist: list[tuple[bool, str]] = [
        (has_tests_dir, "No tests directory"),
        (has_ci_workflows, "No CI configuration"),
        (has_env_example, "No environment config sample"),
        (has_dockerfile, "No Docker setup"),
        (has_src_dir, "No organized source directory"),
        (has_linter_config, "No linter/formatter config"),
        (has_contributing, "No contributing guide"),
    ]

    return RepoStructureAnalysis(
        repo_name=repo_name,
        score=score,
        has_src_dir=has_src_dir,
        has_tests_dir=has_tests_dir,
        has_package_json=has_package_json,
        has_python_manifest=has_python_manifest,
        has_env_example=has_env_example,
        has_dockerfile=has_dockerfile,
        has_ci_workflows=has_ci_workflows,
        has_gitignore=has_gitignore,
        has_contributing=has_contributing,
        has_changelog=has_changelog,
        has_linter_config=has_linter_config,
        directory_count=directory_count,
        is_modular=is_modular,
        missing=tuple(label for ok, label in checklist if not ok),
    )


def analyze_structures(samples: Iterable[TreeSample]) -> tuple[RepoStructureAnalysis, ...]:
    return tuple(analyze_structure(sample.repo_name, sample.paths) for sample in samples)
