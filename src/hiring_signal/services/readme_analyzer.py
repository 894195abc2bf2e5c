"""README quality analysis — pattern detectors plus three weighted sub-scores.

The detectors populate an eleven-item checklist; the checklist feeds a
structural, a professional-signal and a storytelling score which are
blended 35/35/30 into the final README score.
"""

from __future__ import annotations

import re
from typing import Iterable

from hiring_signal.domain.entities import ReadmeAnalysis, ReadmeSample, RepoReadme
from hiring_signal.services.scoring_utils import round_half_up

# ── Compiled detectors ──────────────────────────────────────────────────────

_I = re.IGNORECASE

_TITLE = re.compile(r"^#\s+.+", re.MULTILINE)
_TOC_HEADING = re.compile(r"#{1,3}\s*(table of contents|contents|toc)", _I)
_TOC_ANCHOR_ITEM = re.compile(r"\n\s*-\s*\[.*\]\(#.*\)")
_INSTALL_HEADING = re.compile(r"#{1,3}\s*(install|setup|getting started|quick start)", _I)
_INSTALL_COMMAND = re.compile(
    r"(npm install|pip install|yarn add|docker build|brew install|cargo install|go get)", _I
)
_USAGE_HEADING = re.compile(r"#{1,3}\s*(usage|how to use|examples?|demo|run)", _I)
_USAGE_COMMAND = re.compile(r"(npm run|python |node |cargo run|go run)", _I)
_ARCHITECTURE_HEADING = re.compile(
    r"#{1,3}\s*(architect|design|structure|overview|how it works|system design|diagram)", _I
)
_MARKDOWN_IMAGE = re.compile(r"!\[.*\]\(.*\)")
_HTML_IMAGE = re.compile(r"<img\s", _I)
_LINKED_BADGE = re.compile(r"\[!\[.*\]\(https?://.*\)\]\(.*\)")
_SHIELDS = re.compile(r"img\.shields\.io")
_BADGE_WORD = re.compile(r"badge", _I)
_CONTRIBUTING_HEADING = re.compile(r"#{1,3}\s*(contribut|pull request)", _I)
_CONTRIBUTING_FILE = re.compile(r"CONTRIBUTING\.md", _I)
_LICENSE_HEADING = re.compile(r"#{1,3}\s*license", _I)
_DEMO_LINK = re.compile(
    r"(live demo|deployed|https?://.*\.(vercel|netlify|herokuapp|github\.io|surge\.sh|render\.com|fly\.dev))",
    _I,
)
_API_HEADING = re.compile(r"#{1,3}\s*(api|endpoint|route)", _I)
_PROBLEM_HEADING = re.compile(r"#{1,3}\s*(problem|motivation|why|background|goal|objective)", _I)
_HEADING_LINE = re.compile(r"^#{1,6}\s")

_LICENSE_PHRASES: tuple[str, ...] = ("mit license", "apache license", "gpl")
_PROBLEM_PHRASES: tuple[str, ...] = ("this project", "solves", "built to")

IMPACT_KEYWORDS: tuple[str, ...] = (
    "users", "performance", "scalable", "deployed", "production", "million",
    "thousand", "enterprise", "revenue", "traffic", "uptime", "latency", "concurrent",
)

# A missing TOC / API section only matters once the README is long.
_LONG_README_WORDS = 200


def _structural_score(
    has_title: bool,
    has_toc: bool,
    heading_count: int,
    code_block_count: int,
    word_count: int,
    has_screenshots: bool,
) -> int:
    score = 0
    if has_title:
        score += 20
    if has_toc:
        score += 15

    if heading_count >= 4:
        score += 20
    elif heading_count >= 2:
        score += 10

    if code_block_count >= 2:
        score += 15
    elif code_block_count >= 1:
        score += 8

    if word_count >= 500:
        score += 20
    elif word_count >= 300:
        score += 15
    elif word_count >= 100:
        score += 10
    elif word_count >= 50:
        score += 5

    if has_screenshots:
        score += 10
    return min(100, score)


def _weighted_points(grants: Iterable[tuple[bool, int]]) -> int:
    return min(100, sum(points for present, points in grants if present))


def analyze_readme(content: str) -> ReadmeAnalysis:
    """Run every detector over *content* and score the result."""
    lower = content.lower()

    has_title = bool(_TITLE.search(content))
    has_toc = bool(_TOC_HEADING.search(content)) or len(_TOC_ANCHOR_ITEM.findall(content)) >= 3
    has_installation = bool(_INSTALL_HEADING.search(content) or _INSTALL_COMMAND.search(content))
    has_usage = bool(_USAGE_HEADING.search(content) or _USAGE_COMMAND.search(content))
    has_architecture = bool(_ARCHITECTURE_HEADING.search(content))
    has_screenshots = bool(_MARKDOWN_IMAGE.search(content) or _HTML_IMAGE.search(content))
    has_badges = bool(
        _LINKED_BADGE.search(content) or _SHIELDS.search(content) or _BADGE_WORD.search(content)
    )
    has_contributing = bool(
        _CONTRIBUTING_HEADING.search(content) or _CONTRIBUTING_FILE.search(content)
    )
    has_license = bool(_LICENSE_HEADING.search(content)) or any(
        phrase in lower for phrase in _LICENSE_PHRASES
    )
    has_demo_link = bool(_DEMO_LINK.search(content))
    has_api_docs = bool(_API_HEADING.search(content))
    has_impact_keywords = any(keyword in lower for keyword in IMPACT_KEYWORDS)
    has_problem_framing = bool(_PROBLEM_HEADING.search(content)) or any(
        phrase in lower for phrase in _PROBLEM_PHRASES
    )

    word_count = len(content.split())
    heading_count = sum(1 for line in content.split("\n") if _HEADING_LINE.match(line))
    code_block_count = content.count("```") // 2

    structural = _structural_score(
        has_title, has_toc, heading_count, code_block_count, word_count, has_screenshots
    )
    professional = _weighted_points(
        [
            (has_badges, 20),
            (has_license, 15),
            (has_contributing, 15),
            (has_installation, 20),
            (has_api_docs, 15),
            (has_demo_link, 15),
        ]
    )
    storytelling = _weighted_points(
        [
            (has_usage, 20),
            (has_architecture, 20),
            (has_screenshots, 15),
            (has_demo_link, 15),
            (has_impact_keywords, 15),
            (has_problem_framing, 15),
        ]
    )
    score = min(100, round_half_up(structural * 0.35 + professional * 0.35 + storytelling * 0.30))

    is_long = word_count > _LONG_README_WORDS
    checklist: list[tuple[bool, str]] = [
        (has_title, "H1 title"),
        (has_toc or not is_long, "Table of Contents"),
        (has_installation, "Installation instructions"),
        (has_usage, "Usage examples"),
        (has_architecture, "Architecture diagram"),
        (has_screenshots, "Screenshots or visuals"),
        (has_demo_link, "Live demo link"),
        (has_contributing, "Contributing guide"),
        (has_badges, "Status badges"),
        (has_api_docs or not is_long, "API documentation"),
        (has_impact_keywords, "Impact/scale metrics"),
    ]
    missing = tuple(label for present, label in checklist if not present)

    return ReadmeAnalysis(
        score=score,
        structural_score=structural,
        professional_score=professional,
        storytelling_score=storytelling,
        has_title=has_title,
        has_toc=has_toc,
        has_installation=has_installation,
        has_usage=has_usage,
        has_architecture=has_architecture,
        has_screenshots=has_screenshots,
        has_badges=has_badges,
        has_contributing=has_contributing,
        has_license=has_license,
        has_demo_link=has_demo_link,
        has_api_docs=has_api_docs,
        has_impact_keywords=has_impact_keywords,
        word_count=word_count,
        heading_count=heading_count,
        code_block_count=code_block_count,
        missing=missing,
    )


def analyze_readmes(samples: Iterable[ReadmeSample]) -> tuple[RepoReadme, ...]:
    """Analyze every sampled README, keeping the sample order."""
    return tuple(
        RepoReadme(repo_name=sample.repo_name, analysis=analyze_readme(sample.content))
        for sample in samples
    )
