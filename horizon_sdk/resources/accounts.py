"""Account detail request descriptor."""

from typing import ClassVar

from ..errors import RequestBuildError
from ..records.resources import Account
from ..streaming.decoding import ModelPayloadDecoder, PayloadDecoder
from .base import TOO_FEW_PARAMETERS, ResourceRequest, segment


class AccountRequest(ResourceRequest):
    """Request for the current state of one account."""

    resource: ClassVar[str] = "accounts"

    account_id: str = ""

    @property
    def is_detail(self) -> bool:
        return True

    def build_url(self) -> str:
        if not self.account_id:
            raise RequestBuildError(TOO_FEW_PARAMETERS)
        return self._validated(f"accounts/{segment(self.account_id)}")

    def payload_decoder(self) -> PayloadDecoder:
        return ModelPayloadDecoder(Account)
