"""
Custom exceptions for the base fee trap.

These exceptions provide clear error semantics across the system.
Insufficient data and a zero baseline are not errors: they are reported as
non-triggering decisions with a sentinel payload.
"""


class TrapError(Exception):
    """Base exception for trap failures."""
    pass


class EncodingError(TrapError):
    """Raised when a value cannot be represented in the wire encoding."""
    pass


class DecodingError(TrapError):
    """Raised when encoded input is malformed. Never silently defaulted."""
    pass


class SamplerError(TrapError):
    """Raised when the monitored metric cannot be read."""
    pass


class ConfigurationError(TrapError):
    """Raised when configuration is invalid or missing."""
    pass


class ArithmeticOverflowError(TrapError, OverflowError):
    """Raised when an intermediate value exceeds uint256."""
    pass
