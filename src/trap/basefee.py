"""
Base fee volatility trap.

Implements the two-call trap contract: collect() samples the current metric
and encodes it; should_respond() decodes the two most recent samples and
applies the decision rule. Threshold and encoding come from TrapConfig.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from src.core.config import SampleEncoding, TrapConfig, config

from .encoding import decode_sample, encode_sample
from .rule import decide
from .schema import Decision, Sample
from .sources import FeeSource

logger = logging.getLogger(__name__)


class BaseFeeTrap:
    """
    Stateless detector for block-to-block base fee swings.

    Notes:
    - The source is only touched by sample()/collect().
    - should_respond() reads no ambient state; identical input yields
      identical output.
    """

    def __init__(self, source: FeeSource, settings: Optional[TrapConfig] = None) -> None:
        self.source = source
        self.settings = settings or config.trap

    def sample(self) -> Sample:
        value = self.source.read()
        if self.settings.encoding is SampleEncoding.VALUE_THRESHOLD:
            return Sample(value=value, threshold=self.settings.threshold_percent)
        return Sample(value=value)

    def collect(self) -> bytes:
        return encode_sample(self.sample(), self.settings.encoding)

    def evaluate(self, data: Sequence[bytes]) -> Decision:
        """
        Decode samples (newest first) and run the decision rule.

        Only the first two entries are decoded; a malformed entry among them
        raises DecodingError.
        """
        samples: List[Sample] = [
            decode_sample(item, self.settings.encoding) for item in list(data)[:2]
        ]
        decision = decide(
            samples,
            threshold=self.settings.threshold_percent,
            source=self.settings.threshold_source,
            label=self.settings.alert_label,
        )
        logger.debug(
            "Decision triggered=%s (threshold %s%%, version %s)",
            decision.triggered,
            self.settings.threshold_percent,
            self.settings.threshold_version,
        )
        return decision

    def should_respond(self, data: Sequence[bytes]) -> Tuple[bool, bytes]:
        return self.evaluate(data).as_tuple()
