"""Transaction request descriptor."""

from typing import ClassVar

from pydantic import Field

from ..records.resources import Transaction
from ..streaming.decoding import ModelPayloadDecoder, PayloadDecoder
from .base import PagedRequest, segment


class TransactionRequest(PagedRequest):
    """Request for transactions, or for one transaction by hash."""

    resource: ClassVar[str] = "transactions"

    for_account: str = ""
    for_ledger: int = Field(0, ge=0)
    transaction_hash: str = ""
    include_failed: bool = False

    @property
    def is_detail(self) -> bool:
        return bool(self.transaction_hash)

    def build_url(self) -> str:
        self._ensure_single_filter(self.for_account, self.for_ledger, self.transaction_hash)

        endpoint = "transactions"
        if self.for_account:
            endpoint = f"accounts/{segment(self.for_account)}/transactions"
        elif self.for_ledger:
            endpoint = f"ledgers/{self.for_ledger}/transactions"
        elif self.transaction_hash:
            endpoint = f"transactions/{segment(self.transaction_hash)}"

        return self._with_query(endpoint, include_failed=self.include_failed)

    def payload_decoder(self) -> PayloadDecoder:
        return ModelPayloadDecoder(Transaction)
