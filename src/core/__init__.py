"""
Core module: Configuration, logging, and exception handling.
"""

from .config import (
    BlockMetric,
    Config,
    RpcConfig,
    SampleEncoding,
    ThresholdSource,
    TrapConfig,
    config,
)
from .exceptions import (
    ArithmeticOverflowError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    SamplerError,
    TrapError,
)

__all__ = [
    "BlockMetric",
    "Config",
    "RpcConfig",
    "SampleEncoding",
    "ThresholdSource",
    "TrapConfig",
    "config",
    "ArithmeticOverflowError",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "SamplerError",
    "TrapError",
]
