"""
Volatility decision rule.

Pure function of two samples (newest first): integer percent change of the
current sample relative to the previous one, compared with a threshold using
>=. No history beyond one prior sample, no smoothing.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from src.core.config import ThresholdSource
from src.core.exceptions import ArithmeticOverflowError, DecodingError

from .encoding import encode_alert_payload
from .schema import NOT_ENOUGH_DATA, STABLE, UINT256_MAX, ZERO_BASELINE, Decision, Sample

logger = logging.getLogger(__name__)

DEFAULT_ALERT_LABEL = "Basefee spike"


def percent_change(current: int, previous: int) -> int:
    """
    Truncated percent change of current relative to previous.

    floor(|current - previous| * 100 / previous). The difference is taken as
    max - min so no negative intermediate exists.

    Raises:
        ValueError: If previous is zero (callers guard first) or a value is negative.
        ArithmeticOverflowError: If the scaled difference exceeds uint256, matching
            checked on-chain arithmetic.
    """
    if current < 0 or previous < 0:
        raise ValueError("Sample values must be non-negative")
    if previous == 0:
        raise ValueError("Percent change is undefined for a zero baseline")

    diff = max(current, previous) - min(current, previous)
    scaled = diff * 100
    if scaled > UINT256_MAX:
        raise ArithmeticOverflowError("Scaled difference exceeds uint256")
    return scaled // previous


def resolve_threshold(
    previous: Sample,
    threshold: int,
    source: ThresholdSource = ThresholdSource.CONFIG,
) -> int:
    """Threshold governing a decision; always the previous sample's, never the current's."""
    if ThresholdSource(source) is ThresholdSource.CONFIG:
        return threshold
    if previous.threshold is None:
        raise DecodingError("Previous sample carries no threshold")
    return previous.threshold


def decide(
    samples: Sequence[Sample],
    threshold: int,
    source: ThresholdSource = ThresholdSource.CONFIG,
    label: Optional[str] = None,
) -> Decision:
    """
    Decide whether the two most recent samples show a volatility spike.

    Args:
        samples: Samples ordered newest first; only the first two are used
        threshold: Percent threshold from configuration
        source: Whether the threshold comes from configuration or from the
            previous sample's embedded threshold
        label: Label written into the alert payload

    Returns:
        Decision. Fewer than two samples and a zero baseline yield a
        non-triggering decision with a sentinel payload.
    """
    if len(samples) < 2:
        return Decision(triggered=False, payload=NOT_ENOUGH_DATA)

    current, previous = samples[0], samples[1]

    if previous.value == 0:
        return Decision(triggered=False, payload=ZERO_BASELINE)

    change = percent_change(current.value, previous.value)
    limit = resolve_threshold(previous, threshold, source)

    if change >= limit:
        logger.debug(
            "Volatility %s%% >= %s%% (current=%s previous=%s)",
            change,
            limit,
            current.value,
            previous.value,
        )
        payload = encode_alert_payload(
            label or DEFAULT_ALERT_LABEL, current.value, previous.value, change
        )
        return Decision(triggered=True, payload=payload)

    return Decision(triggered=False, payload=STABLE)
