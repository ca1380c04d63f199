"""
Unit tests for trap schema.

Tests the Pydantic models and sentinel payloads.
"""

import pytest

from src.trap.schema import (
    NOT_ENOUGH_DATA,
    SENTINEL_PAYLOADS,
    STABLE,
    UINT256_MAX,
    ZERO_BASELINE,
    Decision,
    Sample,
)


class TestSample:
    """Test Sample model."""

    def test_value_only(self):
        sample = Sample(value=12)
        assert sample.value == 12
        assert sample.threshold is None

    def test_bounds(self):
        assert Sample(value=0).value == 0
        assert Sample(value=UINT256_MAX).value == UINT256_MAX

    @pytest.mark.parametrize("value", [-1, UINT256_MAX + 1])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValueError):
            Sample(value=value)

    @pytest.mark.parametrize("value", [True, 1.5, "10"])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValueError):
            Sample(value=value)

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            Sample(value=1, threshold=-2)

    def test_immutable(self):
        sample = Sample(value=1)
        with pytest.raises(ValueError):
            sample.value = 2


class TestDecision:
    """Test Decision model."""

    def test_as_tuple(self):
        assert Decision(triggered=False, payload=STABLE).as_tuple() == (False, STABLE)

    def test_sentinels(self):
        assert SENTINEL_PAYLOADS == {NOT_ENOUGH_DATA, ZERO_BASELINE, STABLE}
        assert NOT_ENOUGH_DATA == b"Not enough data"
        assert ZERO_BASELINE == b"Previous basefee is zero"
        assert STABLE == b"Stable gas"

    def test_is_sentinel(self):
        assert Decision(triggered=False, payload=NOT_ENOUGH_DATA).is_sentinel
        assert not Decision(triggered=True, payload=b"\x00" * 32).is_sentinel
