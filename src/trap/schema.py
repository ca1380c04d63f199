"""
Schema definitions for the base fee trap.

Samples and decisions are immutable. A Sample exists only for the duration of
the call that produced it; the operator owns any history of encoded samples.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

UINT256_MAX = 2**256 - 1

NOT_ENOUGH_DATA = b"Not enough data"
ZERO_BASELINE = b"Previous basefee is zero"
STABLE = b"Stable gas"

SENTINEL_PAYLOADS = frozenset({NOT_ENOUGH_DATA, ZERO_BASELINE, STABLE})


class Sample(BaseModel):
    """
    One snapshot of the monitored metric.

    Fields:
    - value: metric value in its smallest unit (wei for the base fee)
    - threshold: percent threshold carried by the value_threshold encoding,
      None when the sample was produced with the value-only encoding
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, le=UINT256_MAX, strict=True)
    threshold: Optional[int] = Field(None, ge=0, le=UINT256_MAX, strict=True)


class Decision(BaseModel):
    """
    Output of the decision rule.

    Fields:
    - triggered: True if the operator should respond
    - payload: structured alert payload when triggered, otherwise a sentinel
    """

    model_config = ConfigDict(frozen=True)

    triggered: bool
    payload: bytes

    def as_tuple(self) -> Tuple[bool, bytes]:
        return self.triggered, self.payload

    @property
    def is_sentinel(self) -> bool:
        return self.payload in SENTINEL_PAYLOADS


class AlertPayload(BaseModel):
    """Decoded structured payload of a triggered decision."""

    model_config = ConfigDict(frozen=True)

    label: str
    current: int = Field(ge=0, le=UINT256_MAX)
    previous: int = Field(ge=0, le=UINT256_MAX)
    percent_change: int = Field(ge=0, le=UINT256_MAX)
