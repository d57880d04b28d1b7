"""
Tests for the directional compare state machine.
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from ghcompare.direction import DirectionalCompare, resolve_concurrent
from ghcompare.types.compare import CompareState
from ghcompare.types.payloads import CommitPayload, ComparePayload, FileChangePayload

EMPTY = ComparePayload()
NON_EMPTY = ComparePayload(
    commits=[CommitPayload("a" * 40, "msg", "Jane", "2024-01-01T00:00:00Z", "jane")]
)
FILES_ONLY = ComparePayload(
    files=[FileChangePayload("a.py", "modified", 1, 0, 1)]
)

payload_strategy = st.sampled_from([EMPTY, NON_EMPTY, FILES_ONLY])
ref_strategy = st.text(min_size=1, max_size=10, alphabet="abcdefv0123456789.")


def run_sequential(base: str, head: str, forward: ComparePayload, reverse: ComparePayload):
    responses = {(base, head): forward, (head, base): reverse}
    requested = []
    machine = DirectionalCompare(base, head)
    while (refs := machine.next_request()) is not None:
        requested.append(refs)
        machine.record(responses[refs])
    return machine.outcome(), requested


def test_non_empty_first_result_finishes_immediately() -> None:
    outcome, requested = run_sequential("v1", "v2", NON_EMPTY, EMPTY)

    assert requested == [("v1", "v2")]
    assert outcome.state is CompareState.DONE
    assert outcome.swapped is False
    assert (outcome.from_version, outcome.to_version) == ("v1", "v2")
    assert outcome.payload is NON_EMPTY


def test_files_without_commits_count_as_non_empty() -> None:
    outcome, requested = run_sequential("v1", "v2", FILES_ONLY, NON_EMPTY)

    assert requested == [("v1", "v2")]
    assert outcome.payload is FILES_ONLY


def test_empty_first_result_triggers_one_swapped_request() -> None:
    outcome, requested = run_sequential("v2", "v1", EMPTY, NON_EMPTY)

    assert requested == [("v2", "v1"), ("v1", "v2")]
    assert outcome.state is CompareState.DONE
    assert outcome.swapped is True
    assert (outcome.from_version, outcome.to_version) == ("v1", "v2")
    assert outcome.payload is NON_EMPTY


def test_both_directions_empty_is_exhausted() -> None:
    outcome, requested = run_sequential("v1", "v2", EMPTY, EMPTY)

    assert len(requested) == 2
    assert outcome.state is CompareState.EXHAUSTED
    assert outcome.swapped is True
    assert (outcome.from_version, outcome.to_version) == ("v2", "v1")


def test_record_after_finish_raises() -> None:
    machine = DirectionalCompare("v1", "v2")
    machine.record(NON_EMPTY)

    assert machine.next_request() is None
    with pytest.raises(RuntimeError):
        machine.record(NON_EMPTY)


def test_outcome_before_finish_raises() -> None:
    machine = DirectionalCompare("v1", "v2")
    machine.record(EMPTY)

    assert machine.state is CompareState.SWAPPED
    with pytest.raises(RuntimeError):
        machine.outcome()


@given(
    base=ref_strategy,
    head=ref_strategy,
    forward=payload_strategy,
    reverse=payload_strategy,
)
@settings(max_examples=100)
def test_concurrent_resolution_matches_sequential(
    base: str, head: str, forward: ComparePayload, reverse: ComparePayload
) -> None:
    """Fetching both directions at once picks the same outcome as fetching in turn."""
    assume(base != head)
    sequential, requested = run_sequential(base, head, forward, reverse)
    concurrent = resolve_concurrent(base, head, forward, reverse)

    assert len(requested) <= 2
    assert concurrent == sequential
