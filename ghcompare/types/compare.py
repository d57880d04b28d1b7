"""Comparison result data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

STATUS_ADDED = "added"
STATUS_MODIFIED = "modified"
STATUS_REMOVED = "removed"
STATUS_RENAMED = "renamed"


class CompareState(str, Enum):
    """States of the directional compare state machine."""

    INITIAL = "initial"
    SWAPPED = "swapped"
    DONE = "done"
    EXHAUSTED = "exhausted"  # both directions came back empty


@dataclass
class Commit:
    """A commit as shown in a comparison."""

    hash: str  # first 7 characters of the SHA
    message: str
    date: str
    author: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "message": self.message,
            "date": self.date,
            "author": self.author,
        }


@dataclass
class FileChange:
    """A changed file as shown in a comparison."""

    file: str
    changes: int
    insertions: int
    deletions: int
    status: str  # "added", "modified", "removed", "renamed"
    patch: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "changes": self.changes,
            "insertions": self.insertions,
            "deletions": self.deletions,
            "status": self.status,
            "patch": self.patch,
        }


@dataclass
class ComparisonStats:
    """Aggregate statistics derived from a comparison's commits and files."""

    commits: int
    files_changed: int
    insertions: int
    deletions: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "commits": self.commits,
            "filesChanged": self.files_changed,
            "insertions": self.insertions,
            "deletions": self.deletions,
        }


@dataclass
class ComparisonResult:
    """Normalized result of comparing two refs."""

    from_version: str
    to_version: str
    owner: str
    repo: str
    commits: list[Commit] = field(default_factory=list)
    files: list[FileChange] = field(default_factory=list)
    stats: ComparisonStats = field(
        default_factory=lambda: ComparisonStats(0, 0, 0, 0)
    )
    swapped: bool = False
    state: CompareState = CompareState.DONE

    @property
    def is_empty(self) -> bool:
        return not self.commits and not self.files

    def find_file(self, filename: str) -> FileChange | None:
        """Return the file whose path matches ``filename`` exactly."""
        for change in self.files:
            if change.file == filename:
                return change
        return None

    def to_dict(self) -> dict[str, Any]:
        """Render the result in the camelCase shape the web UI consumed."""
        return {
            "fromVersion": self.from_version,
            "toVersion": self.to_version,
            "commits": [c.to_dict() for c in self.commits],
            "files": [f.to_dict() for f in self.files],
            "stats": self.stats.to_dict(),
            "repository": {"owner": self.owner, "repo": self.repo},
        }
