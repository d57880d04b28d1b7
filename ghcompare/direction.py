"""
Directional compare state machine.

GitHub's compare endpoint is directional: it reports what ``head`` adds on
top of ``base``. Users picking two tag names cannot always tell which one is
older, so an empty first result is retried once with the refs swapped.

    INITIAL --non-empty--> DONE
    INITIAL --empty------> SWAPPED --non-empty--> DONE
                                   --empty------> EXHAUSTED

EXHAUSTED covers both "the refs really are identical" and "both directions
came back empty"; the two cannot be told apart from the API responses.
"""

from dataclasses import dataclass

from ghcompare.types.compare import CompareState
from ghcompare.types.payloads import ComparePayload


@dataclass
class CompareOutcome:
    """The payload that won plus the logical direction it represents."""

    payload: ComparePayload
    from_version: str
    to_version: str
    swapped: bool
    state: CompareState


class DirectionalCompare:
    """
    Drives at most two compare requests for a ``(base, head)`` pair.

    Usage:
        machine = DirectionalCompare(base, head)
        while (refs := machine.next_request()) is not None:
            machine.record(fetch(*refs))
        outcome = machine.outcome()
    """

    def __init__(self, base: str, head: str) -> None:
        self.base = base
        self.head = head
        self.state = CompareState.INITIAL
        self._payload: ComparePayload | None = None
        self._swapped = False

    @property
    def finished(self) -> bool:
        return self.state in (CompareState.DONE, CompareState.EXHAUSTED)

    @property
    def swapped(self) -> bool:
        """True when the recorded payload came from the reversed request."""
        return self._swapped

    def next_request(self) -> tuple[str, str] | None:
        """Return the ``(base, head)`` to request next, or None when finished."""
        if self.state is CompareState.INITIAL:
            return (self.base, self.head)
        if self.state is CompareState.SWAPPED:
            return (self.head, self.base)
        return None

    def record(self, payload: ComparePayload) -> CompareState:
        """Feed the response to the request returned by ``next_request``."""
        if self.state is CompareState.INITIAL:
            self._payload = payload
            self._swapped = False
            self.state = CompareState.SWAPPED if payload.is_empty else CompareState.DONE
        elif self.state is CompareState.SWAPPED:
            self._payload = payload
            self._swapped = True
            self.state = CompareState.EXHAUSTED if payload.is_empty else CompareState.DONE
        else:
            raise RuntimeError(f"Directional compare already finished ({self.state.value})")
        return self.state

    def outcome(self) -> CompareOutcome:
        """Return the winning payload; the direction is swapped if the second request won."""
        if not self.finished or self._payload is None:
            raise RuntimeError("Directional compare has not finished")
        swapped = self._swapped
        return CompareOutcome(
            payload=self._payload,
            from_version=self.head if swapped else self.base,
            to_version=self.base if swapped else self.head,
            swapped=swapped,
            state=self.state,
        )


def resolve_concurrent(
    base: str, head: str, forward: ComparePayload, reverse: ComparePayload | None
) -> CompareOutcome:
    """
    Pick the outcome from both directions fetched at once.

    Replays the responses through ``DirectionalCompare`` so the result is the
    same as issuing the requests one after the other.
    """
    machine = DirectionalCompare(base, head)
    machine.record(forward)
    if not machine.finished and reverse is not None:
        machine.record(reverse)
    return machine.outcome()
