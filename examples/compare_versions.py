#!/usr/bin/env python3
"""
Compare two versions of a GitHub repository.

Run with: python examples/compare_versions.py psf/requests v2.31.0 v2.32.0
Set GITHUB_TOKEN to raise the API rate limit.
"""

import logging
import sys

from ghcompare import ComparatorClient, GhCompareError, parse_repository_url
from ghcompare.logging import configure_logging
from ghcompare.patch import summarize_patch

configure_logging(level=logging.INFO)

if len(sys.argv) < 2:
    print(__doc__)
    sys.exit(2)

ref = parse_repository_url(sys.argv[1])
if ref is None:
    print(f"Not a GitHub repository: {sys.argv[1]}")
    sys.exit(2)

with ComparatorClient.from_env() as client:
    try:
        if len(sys.argv) >= 4:
            base, head = sys.argv[2], sys.argv[3]
        else:
            # Two most recent tags, oldest first
            versions = client.list_versions(ref.owner, ref.name)
            if len(versions) < 2:
                print(f"{ref.full_name} has fewer than two tags")
                sys.exit(1)
            base, head = versions[1], versions[0]

        result = client.compare_versions(ref.owner, ref.name, base, head)
    except GhCompareError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

print(f"=== {ref.full_name}: {result.from_version} -> {result.to_version} ===")
if result.swapped:
    print("(versions were given newest first; showing them oldest first)")
if result.is_empty:
    print("No differences found in either direction.")
    sys.exit(0)

stats = result.stats
print(
    f"{stats.commits} commits, {stats.files_changed} files, "
    f"+{stats.insertions} -{stats.deletions}\n"
)

print("Commits:")
for commit in result.commits[:20]:
    subject = commit.message.splitlines()[0] if commit.message else ""
    print(f"  {commit.hash}  {commit.author:<20}  {subject}")

print("\nFiles:")
for change in result.files:
    diff = summarize_patch(change.file, change.patch)
    print(f"  {change.status:<9} {change.file}  +{change.insertions} -{change.deletions}  ({len(diff.lines)} diff lines)")
