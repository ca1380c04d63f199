"""
Unit tests for the response emitter.
"""

import logging

from backend.emitter import SIGNAL_EVENT_NAME, ResponseEmitter, SignalEvent


def test_emit_returns_tagged_event():
    emitter = ResponseEmitter()
    event = emitter.emit_signal(b"\x01\x02")

    assert isinstance(event, SignalEvent)
    assert event.name == SIGNAL_EVENT_NAME == "SignalEmitted"
    assert event.data == b"\x01\x02"
    assert event.emitted_at.tzinfo is not None


def test_emit_passes_payload_through_unchanged():
    received = []
    emitter = ResponseEmitter()
    emitter.subscribe(received.append)

    for data in (b"", b"Stable gas", b"\xff" * 200):
        emitter.emit_signal(data)

    assert [e.data for e in received] == [b"", b"Stable gas", b"\xff" * 200]


def test_listeners_called_in_order():
    calls = []
    emitter = ResponseEmitter()
    emitter.subscribe(lambda e: calls.append(("first", e.event_id)))
    emitter.subscribe(lambda e: calls.append(("second", e.event_id)))

    event = emitter.emit_signal(b"x")

    assert calls == [("first", event.event_id), ("second", event.event_id)]


def test_each_emission_is_distinct():
    emitter = ResponseEmitter()
    first = emitter.emit_signal(b"x")
    second = emitter.emit_signal(b"x")
    assert first.event_id != second.event_id


def test_emission_is_logged(caplog):
    emitter = ResponseEmitter()
    with caplog.at_level(logging.WARNING, logger="backend.emitter"):
        emitter.emit_signal(b"\xab")
    assert "SignalEmitted" in caplog.text
    assert "0xab" in caplog.text
