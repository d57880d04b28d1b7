"""Line-level diff data models."""

from dataclasses import dataclass, field

LINE_ADDED = "added"
LINE_REMOVED = "removed"
LINE_CONTEXT = "context"


@dataclass
class DiffLine:
    """One renderable line of a file's patch."""

    type: str  # "added", "removed", "context"
    content: str
    line_number: int


@dataclass
class FileDiff:
    """Parsed patch of a single file with added/removed line counts."""

    file: str
    lines: list[DiffLine] = field(default_factory=list)
    additions: int = 0
    deletions: int = 0
