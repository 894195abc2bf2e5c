"""Commit-message quality analysis over a pooled sample of first lines."""

from __future__ import annotations

import re
from typing import Iterable

from hiring_signal.domain.entities import CommitQualityAnalysis, CommitSample
from hiring_signal.services.scoring_utils import clamp, round_half_up

_GENERIC = re.compile(
    r"^(update|fix|wip|test|minor|changes|stuff|\.+|initial commit|first commit|typo|misc"
    r"|temp|asdf|commit|save|push|add files|upload|edit|modified)$",
    re.IGNORECASE,
)
_CONVENTIONAL = re.compile(r"^(feat|fix|chore|docs|style|refactor|perf|test|build|ci|revert)(\(.+\))?:\s")
_DESCRIPTIVE_VERB = re.compile(
    r"^(add|create|implement|refactor|remove|update|fix|improve|optimize|migrate|integrate"
    r"|configure|handle|resolve|extract|enable|disable)",
    re.IGNORECASE,
)

_GENERIC_MAX_LENGTH = 3
_DESCRIPTIVE_MIN_LENGTH = 10

NO_DATA_CONCERN = "No commit data available"


def _first_line(message: str) -> str:
    return message.split("\n", maxsplit=1)[0].strip()


def _band(value: int, bands: list[tuple[int, int]], default: int) -> int:
    """Return the points of the first ``(threshold, points)`` band *value* reaches."""
    for threshold, points in bands:
        if value >= threshold:
            return points
    return default


def _band_at_most(value: int, bands: list[tuple[int, int]], default: int) -> int:
    """Return the points of the first ``(ceiling, points)`` band *value* stays within."""
    for ceiling, points in bands:
        if value <= ceiling:
            return points
    return default


def analyze_commits(samples: Iterable[CommitSample]) -> CommitQualityAnalysis:
    """Classify every sampled first line and derive a 0-100 quality score."""
    lines = [_first_line(message) for sample in samples for message in sample.messages]

    if not lines:
        return CommitQualityAnalysis(
            score=0,
            avg_length=0,
            generic_percent=0,
            descriptive_percent=0,
            conventional_percent=0,
            total_analyzed=0,
            concerns=(NO_DATA_CONCERN,),
        )

    generic = sum(
        1 for line in lines if _GENERIC.match(line) or len(line) <= _GENERIC_MAX_LENGTH
    )
    conventional = sum(1 for line in lines if _CONVENTIONAL.match(line))
    descriptive = sum(
        1
        for line in lines
        if _DESCRIPTIVE_VERB.match(line) and len(line) >= _DESCRIPTIVE_MIN_LENGTH
    )

    total = len(lines)
    avg_length = round_half_up(sum(len(line) for line in lines) / total)
    generic_percent = round_half_up(generic / total * 100)
    descriptive_percent = round_half_up(descriptive / total * 100)
    conventional_percent = round_half_up(conventional / total * 100)

    score = (
        _band(avg_length, [(30, 25), (15, 15)], 5)
        + _band_at_most(generic_percent, [(10, 25), (30, 15), (50, 5)], 0)
        + _band(descriptive_percent, [(50, 25), (25, 15)], 5)
        + _band(conventional_percent, [(30, 25), (10, 15)], 5)
    )

    concerns: list[str] = []
    if generic_percent > 40:
        concerns.append(f"{generic_percent}% of commits have generic messages")
    if avg_length < 15:
        concerns.append(f"Average message length is only {avg_length} chars")
    if conventional_percent == 0:
        concerns.append("No conventional commit format used")
    if descriptive_percent < 20:
        concerns.append("Few commits use descriptive action verbs")

    return CommitQualityAnalysis(
        score=clamp(score),
        avg_length=avg_length,
        generic_percent=generic_percent,
        descriptive_percent=descriptive_percent,
        conventional_percent=conventional_percent,
        total_analyzed=total,
        concerns=tuple(concerns),
    )
