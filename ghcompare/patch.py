"""
Unified-diff patch parsing.

Turns the ``patch`` text GitHub attaches to each changed file into a list of
typed lines ready for rendering. File headers (``+++``/``---``) and hunk
headers (``@@``) are dropped, so line numbers are a 1-based renumbering of
the surviving lines rather than positions in the source file.
"""

from ghcompare.types.diff import LINE_ADDED, LINE_CONTEXT, LINE_REMOVED, DiffLine, FileDiff

_HEADER_PREFIXES = ("+++", "---", "@@")


def parse_patch(patch: str | None) -> list[DiffLine]:
    """
    Parse a unified-diff patch into typed lines.

    Never raises: an empty, missing, or malformed patch yields an empty or
    degenerate list.

    Args:
        patch: Patch text for one file (may be None for binary files)

    Returns:
        DiffLine list numbered from 1
    """
    if not patch:
        return []

    lines: list[DiffLine] = []
    line_number = 1
    for raw in patch.split("\n"):
        if raw.startswith(_HEADER_PREFIXES):
            continue

        if raw.startswith("+"):
            line_type, content = LINE_ADDED, raw[1:]
        elif raw.startswith("-"):
            line_type, content = LINE_REMOVED, raw[1:]
        else:
            line_type, content = LINE_CONTEXT, raw

        lines.append(DiffLine(type=line_type, content=content, line_number=line_number))
        line_number += 1

    return lines


def summarize_patch(filename: str, patch: str | None) -> FileDiff:
    """Parse ``patch`` and count its added and removed lines."""
    lines = parse_patch(patch)
    return FileDiff(
        file=filename,
        lines=lines,
        additions=sum(1 for line in lines if line.type == LINE_ADDED),
        deletions=sum(1 for line in lines if line.type == LINE_REMOVED),
    )
