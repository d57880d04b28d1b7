"""Repository reference parsing.

Accepts the input forms people usually paste into a "repository" field:

- ``https://github.com/owner/name`` (optionally with ``.git`` or a trailing slash)
- ``git@github.com:owner/name.git``
- ``github.com/owner/name``
- ``owner/name``
"""

import re
from dataclasses import dataclass

_REPOSITORY_PATTERNS = [
    re.compile(r"^https://github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$"),
    re.compile(r"^git@github\.com:([^/]+)/([^/]+?)(?:\.git)?$"),
    re.compile(r"^github\.com/([^/]+)/([^/]+?)(?:\.git)?$"),
    re.compile(r"^([^/\s:]+)/([^/\s]+?)(?:\.git)?$"),
]


@dataclass(frozen=True)
class RepositoryRef:
    """An owner/name pair identifying a GitHub repository."""

    owner: str
    name: str

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.name}"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


def parse_repository_url(value: str) -> RepositoryRef | None:
    """
    Derive a repository reference from user input.

    Args:
        value: A GitHub URL, SSH remote, or ``owner/name`` string

    Returns:
        RepositoryRef, or None if the input matches none of the known forms
    """
    text = value.strip()
    if not text:
        return None
    for pattern in _REPOSITORY_PATTERNS:
        match = pattern.match(text)
        if match:
            owner, name = match.group(1), match.group(2)
            if not owner or not name:
                return None
            return RepositoryRef(owner=owner, name=name)
    return None
