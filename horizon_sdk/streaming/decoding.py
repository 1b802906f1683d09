"""
Payload decoders.

A decoder turns one raw payload (a streamed frame, or one entry of a page)
into a typed record. Tagged resources go through two steps: the payload is
read into a RecordEnvelope to find its discriminant, then the same bytes are
decoded again into the model registered for that discriminant. Each step
reports failures with its own stage prefix so integrators can tell a
malformed payload from an unsupported record kind.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from ..config.constants import STREAM_CONTROL_PAYLOADS
from ..errors import DecodeError, UnknownRecordTypeError
from ..records.base import RecordEnvelope
from ..records.registry import RawPayload, RecordRegistry
from .types import PayloadCallback, RecordHandler, invoke_callback

UNMARSHAL_STAGE = "Error unmarshaling data"
DISPATCH_STAGE = "Unmarshaling to the correct operation type"


def _validate(model: Type[BaseModel], data: RawPayload) -> Any:
    if isinstance(data, (bytes, str)):
        return model.model_validate_json(data)
    return model.model_validate(data)


class PayloadDecoder(ABC):
    """Base class for payload decoders."""

    @abstractmethod
    def decode(self, data: RawPayload) -> Any:
        """Decode one payload.

        Raises:
            DecodeError: The payload is malformed or of an unknown kind
        """
        pass

    def decode_many(self, items: List[Dict[str, Any]]) -> List[Any]:
        return [self.decode(item) for item in items]

    def bind(
        self,
        handler: RecordHandler,
        on_record: Optional[Callable[[Any], None]] = None,
    ) -> PayloadCallback:
        """Compose this decoder with a record handler.

        The returned coroutine function is what a StreamSession invokes per
        frame: decode, notify ``on_record`` (used for cursor tracking), then
        hand the record to ``handler``.
        """
        async def on_payload(data: bytes) -> None:
            if data.strip() in STREAM_CONTROL_PAYLOADS:
                return
            record = self.decode(data)
            if on_record is not None:
                on_record(record)
            await invoke_callback(handler, record)

        return on_payload


class TypedPayloadDecoder(PayloadDecoder):
    """Decoder for tagged resources (operations, effects)."""

    def __init__(self, registry: RecordRegistry, dispatch_stage: str = DISPATCH_STAGE):
        self.registry = registry
        self.dispatch_stage = dispatch_stage

    def decode(self, data: RawPayload) -> Any:
        try:
            envelope = _validate(RecordEnvelope, data)
        except ValidationError as e:
            raise DecodeError(UNMARSHAL_STAGE, e) from e

        try:
            return self.registry.decode(envelope.type, data)
        except (UnknownRecordTypeError, ValidationError) as e:
            raise DecodeError(self.dispatch_stage, e) from e


class ModelPayloadDecoder(PayloadDecoder):
    """Decoder for resources with a single shape (transactions, ledgers, accounts)."""

    def __init__(self, model: Type[BaseModel]):
        self.model = model

    def decode(self, data: RawPayload) -> Any:
        try:
            return _validate(self.model, data)
        except ValidationError as e:
            raise DecodeError(UNMARSHAL_STAGE, e) from e
