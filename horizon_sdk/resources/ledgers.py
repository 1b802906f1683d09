"""Ledger request descriptor."""

from typing import ClassVar

from pydantic import Field

from ..records.resources import Ledger
from ..streaming.decoding import ModelPayloadDecoder, PayloadDecoder
from .base import PagedRequest


class LedgerRequest(PagedRequest):
    """Request for closed ledgers, or for one ledger by sequence."""

    resource: ClassVar[str] = "ledgers"

    sequence: int = Field(0, ge=0)

    @property
    def is_detail(self) -> bool:
        return self.sequence > 0

    def build_url(self) -> str:
        endpoint = "ledgers"
        if self.sequence:
            endpoint = f"ledgers/{self.sequence}"
        return self._with_query(endpoint)

    def payload_decoder(self) -> PayloadDecoder:
        return ModelPayloadDecoder(Ledger)
