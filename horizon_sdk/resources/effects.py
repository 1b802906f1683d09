"""Effect request descriptor."""

from typing import ClassVar

from pydantic import Field

from ..records.effects import EFFECTS
from ..streaming.decoding import PayloadDecoder, TypedPayloadDecoder
from .base import PagedRequest, segment

EFFECT_DISPATCH_STAGE = "Unmarshaling to the correct effect type"


class EffectRequest(PagedRequest):
    """Request for effects, optionally scoped to one account, ledger,
    operation or transaction."""

    resource: ClassVar[str] = "effects"

    for_account: str = ""
    for_ledger: int = Field(0, ge=0)
    for_operation: str = ""
    for_transaction: str = ""

    def build_url(self) -> str:
        self._ensure_single_filter(
            self.for_account, self.for_ledger, self.for_operation, self.for_transaction
        )

        endpoint = "effects"
        if self.for_account:
            endpoint = f"accounts/{segment(self.for_account)}/effects"
        elif self.for_ledger:
            endpoint = f"ledgers/{self.for_ledger}/effects"
        elif self.for_operation:
            endpoint = f"operations/{segment(self.for_operation)}/effects"
        elif self.for_transaction:
            endpoint = f"transactions/{segment(self.for_transaction)}/effects"

        return self._with_query(endpoint)

    def payload_decoder(self) -> PayloadDecoder:
        return TypedPayloadDecoder(EFFECTS, dispatch_stage=EFFECT_DISPATCH_STAGE)
