"""
Wire codec for samples and alert payloads.

Uses the Solidity ABI layout so encoded samples are byte-compatible with the
on-chain trap:
- uint256 values are 32-byte big-endian words
- a value sample is one word, a value+threshold sample is two words
- the alert payload is abi.encode(string, uint256, uint256, uint256)

Decoding is strict. Malformed input raises DecodingError; it is never coerced
to zero, which would otherwise pass as a degenerate baseline.
"""

from __future__ import annotations

from typing import Union

from src.core.config import SampleEncoding
from src.core.exceptions import DecodingError, EncodingError

from .schema import UINT256_MAX, AlertPayload, Sample

WORD_SIZE = 32

BytesLike = Union[bytes, bytearray, memoryview]

_SAMPLE_WORDS = {
    SampleEncoding.VALUE: 1,
    SampleEncoding.VALUE_THRESHOLD: 2,
}


def encode_uint256(value: int) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"uint256 must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise EncodingError(f"Value out of uint256 range: {value}")
    return value.to_bytes(WORD_SIZE, "big")


def decode_uint256(data: BytesLike, offset: int = 0) -> int:
    word = bytes(data[offset : offset + WORD_SIZE])
    if len(word) != WORD_SIZE:
        raise DecodingError(
            f"Expected {WORD_SIZE} bytes at offset {offset}, got {len(word)}"
        )
    return int.from_bytes(word, "big")


def sample_size(encoding: SampleEncoding) -> int:
    """Exact byte length of an encoded sample."""
    return _SAMPLE_WORDS[SampleEncoding(encoding)] * WORD_SIZE


def encode_sample(sample: Sample, encoding: SampleEncoding = SampleEncoding.VALUE) -> bytes:
    """
    Encode a sample with the given layout.

    Raises:
        EncodingError: If the value_threshold layout is requested for a sample
            without a threshold.
    """
    encoding = SampleEncoding(encoding)
    if encoding is SampleEncoding.VALUE:
        return encode_uint256(sample.value)
    if sample.threshold is None:
        raise EncodingError("value_threshold encoding requires a sample threshold")
    return encode_uint256(sample.value) + encode_uint256(sample.threshold)


def decode_sample(data: BytesLike, encoding: SampleEncoding = SampleEncoding.VALUE) -> Sample:
    """
    Decode an encoded sample.

    Raises:
        DecodingError: If data is not bytes or its length does not match the
            layout exactly.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodingError(f"Encoded sample must be bytes, got {type(data).__name__}")

    encoding = SampleEncoding(encoding)
    expected = sample_size(encoding)
    if len(data) != expected:
        raise DecodingError(
            f"Malformed {encoding.value} sample: expected {expected} bytes, got {len(data)}"
        )

    value = decode_uint256(data, 0)
    if encoding is SampleEncoding.VALUE:
        return Sample(value=value)
    return Sample(value=value, threshold=decode_uint256(data, WORD_SIZE))


def encode_alert_payload(label: str, current: int, previous: int, percent_change: int) -> bytes:
    text = label.encode("utf-8")
    padding = (-len(text)) % WORD_SIZE
    head = (
        encode_uint256(4 * WORD_SIZE)
        + encode_uint256(current)
        + encode_uint256(previous)
        + encode_uint256(percent_change)
    )
    return head + encode_uint256(len(text)) + text + b"\x00" * padding


def decode_alert_payload(data: BytesLike) -> AlertPayload:
    """
    Decode an alert payload produced by encode_alert_payload.

    Raises:
        DecodingError: On a short buffer, bad string offset, bad length,
            non-zero padding or invalid UTF-8.
    """
    data = bytes(data)
    head_size = 4 * WORD_SIZE
    if len(data) < head_size + WORD_SIZE:
        raise DecodingError(f"Alert payload too short: {len(data)} bytes")

    offset = decode_uint256(data, 0)
    if offset != head_size:
        raise DecodingError(f"Unexpected string offset in alert payload: {offset}")

    length = decode_uint256(data, offset)
    start = offset + WORD_SIZE
    padded = length + ((-length) % WORD_SIZE)
    if len(data) != start + padded:
        raise DecodingError(
            f"Alert payload length mismatch: expected {start + padded} bytes, got {len(data)}"
        )
    if any(data[start + length :]):
        raise DecodingError("Non-zero padding in alert payload string")

    try:
        label = data[start : start + length].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingError(f"Alert label is not valid UTF-8: {exc}") from exc

    return AlertPayload(
        label=label,
        current=decode_uint256(data, WORD_SIZE),
        previous=decode_uint256(data, 2 * WORD_SIZE),
        percent_change=decode_uint256(data, 3 * WORD_SIZE),
    )
