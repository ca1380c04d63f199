"""
Response sink for triggered decisions.

Republishes alert payloads as observable SignalEmitted records. No filtering,
no validation, no decoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("backend.emitter")

SIGNAL_EVENT_NAME = "SignalEmitted"


class SignalEvent(BaseModel):
    """
    Observable record of an emitted payload.

    Fields:
    - event_id: unique identifier
    - name: fixed event name
    - data: payload exactly as received
    - emitted_at: emission timestamp
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = SIGNAL_EVENT_NAME
    data: bytes
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


SignalListener = Callable[[SignalEvent], None]


@dataclass
class ResponseEmitter:
    """
    Fire-and-forget sink.

    Every call produces exactly one SignalEvent, which is logged and passed to
    each registered listener in registration order.
    """

    listeners: List[SignalListener] = field(default_factory=list)

    def subscribe(self, listener: SignalListener) -> None:
        self.listeners.append(listener)

    def emit_signal(self, data: bytes) -> SignalEvent:
        event = SignalEvent(data=bytes(data))
        logger.warning("%s id=%s data=0x%s", event.name, event.event_id, event.data.hex())
        for listener in self.listeners:
            listener(event)
        return event
