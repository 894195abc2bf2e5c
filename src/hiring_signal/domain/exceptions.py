"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Only the value objects, the GitHub adapter and the use case raise these;
the scoring core never does.
"""

from __future__ import annotations


class HiringSignalError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidHandleError(HiringSignalError):
    """The supplied username is not a valid GitHub handle."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class ProfileNotFoundError(HiringSignalError):
    """The account does not exist or is not public (404)."""


class GitHubAccessDeniedError(HiringSignalError):
    """GitHub refused the request for a reason other than rate limiting (403)."""


class GitHubRateLimitError(HiringSignalError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class GitHubFetchError(HiringSignalError):
    """Transport failure or unexpected status while talking to GitHub."""
