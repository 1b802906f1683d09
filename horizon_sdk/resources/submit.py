"""Transaction submission descriptor."""

from typing import ClassVar
from urllib.parse import urlencode

from ..errors import RequestBuildError
from ..records.resources import TransactionSuccess
from ..streaming.decoding import ModelPayloadDecoder, PayloadDecoder
from .base import TOO_FEW_PARAMETERS, ResourceRequest


class SubmitRequest(ResourceRequest):
    """Submission of a signed, base64 encoded transaction envelope."""

    resource: ClassVar[str] = "transactions"
    streamable: ClassVar[bool] = False

    transaction_xdr: str = ""

    @property
    def is_detail(self) -> bool:
        return True

    def build_url(self) -> str:
        if not self.transaction_xdr:
            raise RequestBuildError(TOO_FEW_PARAMETERS)
        return self._validated("transactions?" + urlencode({"tx": self.transaction_xdr}))

    def form(self) -> dict:
        """Form body sent with the POST."""
        return {"tx": self.transaction_xdr}

    def payload_decoder(self) -> PayloadDecoder:
        return ModelPayloadDecoder(TransactionSuccess)
