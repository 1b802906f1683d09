"""Streaming layer for Horizon event streams.

This layer handles:
- Framing ``text/event-stream`` bodies into payloads
- Running one streaming session per subscription
- Cooperative cancellation of sessions
- Decoding payloads into typed records
"""

from .cancellation import CancellationToken
from .decoding import (
    DISPATCH_STAGE,
    UNMARSHAL_STAGE,
    ModelPayloadDecoder,
    PayloadDecoder,
    TypedPayloadDecoder,
)
from .framer import EventFramer, iter_frames
from .session import StreamSession, run_stream
from .types import PayloadCallback, RecordHandler, invoke_callback

__all__ = [
    "CancellationToken",
    "EventFramer",
    "iter_frames",
    "StreamSession",
    "run_stream",
    "PayloadDecoder",
    "TypedPayloadDecoder",
    "ModelPayloadDecoder",
    "UNMARSHAL_STAGE",
    "DISPATCH_STAGE",
    "PayloadCallback",
    "RecordHandler",
    "invoke_callback",
]
