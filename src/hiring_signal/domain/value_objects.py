"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from hiring_signal.domain.exceptions import InvalidHandleError

_HANDLE_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,37}[A-Za-z0-9])?$")
_PROFILE_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<login>[^/?#]+)/?$", re.IGNORECASE
)


@dataclass(frozen=True, slots=True)
class GitHubHandle:
    """Validated GitHub account handle.

    Accepts a bare username (``octocat``), an ``@``-prefixed one, or a
    profile URL like ``https://github.com/octocat``.
    """

    login: str

    @classmethod
    def from_string(cls, raw: str) -> GitHubHandle:
        """Parse and validate a raw handle or profile URL."""
        value = raw.strip()
        match = _PROFILE_URL_RE.match(value)
        if match:
            value = match["login"]
        value = value.removeprefix("@")
        if not _HANDLE_RE.match(value):
            raise InvalidHandleError(
                f"Invalid GitHub username: '{raw.strip()}'. "
                "Expected a handle like 'octocat' or https://github.com/octocat"
            )
        return cls(login=value)

    @property
    def profile_url(self) -> str:
        return f"https://github.com/{self.login}"
