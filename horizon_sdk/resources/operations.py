"""Operation and payment request descriptor."""

from typing import ClassVar, Literal

from pydantic import Field

from ..records.operations import OPERATIONS
from ..streaming.decoding import DISPATCH_STAGE, PayloadDecoder, TypedPayloadDecoder
from .base import PagedRequest, segment

OperationsEndpoint = Literal["operations", "payments"]


class OperationRequest(PagedRequest):
    """
    Request for operations.

    ``endpoint`` selects the collection: ``operations`` lists every operation,
    ``payments`` only the payment-like ones. Scoping by account, ledger or
    transaction keeps the chosen collection; ``operation_id`` names one
    operation and always resolves under ``operations/``.
    """

    resource: ClassVar[str] = "operations"

    for_account: str = ""
    for_ledger: int = Field(0, ge=0)
    for_transaction: str = ""
    operation_id: str = ""
    include_failed: bool = False
    endpoint: OperationsEndpoint = "operations"

    def set_payments_endpoint(self) -> "OperationRequest":
        return self.model_copy(update={"endpoint": "payments"})

    def set_operations_endpoint(self) -> "OperationRequest":
        return self.model_copy(update={"endpoint": "operations"})

    @property
    def is_detail(self) -> bool:
        return bool(self.operation_id)

    def build_url(self) -> str:
        self._ensure_single_filter(
            self.for_account, self.for_ledger, self.for_transaction, self.operation_id
        )

        endpoint = self.endpoint
        if self.for_account:
            endpoint = f"accounts/{segment(self.for_account)}/{self.endpoint}"
        elif self.for_ledger:
            endpoint = f"ledgers/{self.for_ledger}/{self.endpoint}"
        elif self.for_transaction:
            endpoint = f"transactions/{segment(self.for_transaction)}/{self.endpoint}"
        elif self.operation_id:
            endpoint = f"operations/{segment(self.operation_id)}"

        return self._with_query(endpoint, include_failed=self.include_failed)

    def payload_decoder(self) -> PayloadDecoder:
        return TypedPayloadDecoder(OPERATIONS, dispatch_stage=DISPATCH_STAGE)
