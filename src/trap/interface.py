"""
Trap capability contract.

A trap is anything exposing collect() and should_respond(). Monitored targets
(base fee, gas limit, transaction count) implement the same two-function
shape and substitute for one another without a class hierarchy.
"""

from typing import Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class Trap(Protocol):
    """Two-call contract consumed by the operator."""

    def collect(self) -> bytes:
        """Read the monitored metric and return it encoded. Read-only."""
        ...

    def should_respond(self, data: Sequence[bytes]) -> Tuple[bool, bytes]:
        """Decide from encoded samples ordered newest first.

        Must be a pure function of its argument: decoding and arithmetic only.

        Returns:
            (triggered, payload) tuple.
        """
        ...
