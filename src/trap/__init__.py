"""
Trap module: base fee sampling, sample codec and the volatility decision rule.
"""

from .basefee import BaseFeeTrap
from .encoding import (
    decode_alert_payload,
    decode_sample,
    decode_uint256,
    encode_alert_payload,
    encode_sample,
    encode_uint256,
)
from .interface import Trap
from .rule import decide, percent_change
from .schema import (
    NOT_ENOUGH_DATA,
    STABLE,
    UINT256_MAX,
    ZERO_BASELINE,
    AlertPayload,
    Decision,
    Sample,
)
from .sources import FeeSource, RpcBlockMetricSource, StaticFeeSource

__all__ = [
    "BaseFeeTrap",
    "Trap",
    "FeeSource",
    "RpcBlockMetricSource",
    "StaticFeeSource",
    "Sample",
    "Decision",
    "AlertPayload",
    "decide",
    "percent_change",
    "encode_uint256",
    "decode_uint256",
    "encode_sample",
    "decode_sample",
    "encode_alert_payload",
    "decode_alert_payload",
    "NOT_ENOUGH_DATA",
    "ZERO_BASELINE",
    "STABLE",
    "UINT256_MAX",
]
