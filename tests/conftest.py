"""
Pytest configuration and shared fixtures.

Provides trap configurations and encoded sample helpers for unit and
integration tests.
"""

from typing import Callable, List

import pytest

from src.core.config import SampleEncoding, ThresholdSource, TrapConfig
from src.trap.encoding import encode_sample
from src.trap.schema import Sample


@pytest.fixture
def trap_config() -> TrapConfig:
    """
    Default trap settings: 2% threshold from configuration, value-only samples.

    Returns:
        TrapConfig: Explicit instance, independent of environment overrides
    """
    return TrapConfig(
        threshold_percent=2,
        threshold_version="test",
        encoding=SampleEncoding.VALUE,
        threshold_source=ThresholdSource.CONFIG,
    )


@pytest.fixture
def legacy_trap_config() -> TrapConfig:
    """Trap settings for samples that carry their own threshold."""
    return TrapConfig(
        threshold_percent=2,
        threshold_version="test-legacy",
        encoding=SampleEncoding.VALUE_THRESHOLD,
        threshold_source=ThresholdSource.SAMPLE,
    )


@pytest.fixture
def encode_values() -> Callable[..., List[bytes]]:
    """
    Fixture returning a helper that encodes values (newest first) as value-only samples.
    """

    def _encode(*values: int) -> List[bytes]:
        return [encode_sample(Sample(value=v)) for v in values]

    return _encode


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
