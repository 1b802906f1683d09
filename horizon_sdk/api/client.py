"""Main client interface for the Horizon SDK."""

import os
from typing import Any, Dict, Optional, Union

import httpx

from ..config.constants import (
    CURSOR_NOW,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PUBLIC_URL,
    DEFAULT_TESTNET_URL,
    DEFAULT_TIMEOUT,
    HAL_JSON_MEDIA_TYPE,
    HORIZON_URL_ENV_VAR,
)
from ..errors import DecodeError, HorizonError, HorizonRequestError, RequestBuildError
from ..observability.logging import StreamLogger
from ..records.page import Page
from ..records.resources import Account, Ledger, Transaction, TransactionSuccess
from ..reliability.reconnect import CursorTracker, ReconnectConfig, ReconnectingStream
from ..resources import (
    AccountRequest,
    EffectRequest,
    LedgerRequest,
    OperationRequest,
    ResourceRequest,
    SubmitRequest,
    TransactionRequest,
)
from ..streaming.cancellation import CancellationToken
from ..streaming.decoding import UNMARSHAL_STAGE
from ..streaming.types import RecordHandler

REQUEST_HEADERS = {"Accept": HAL_JSON_MEDIA_TYPE}


class HorizonClient:
    """High-level client for a Horizon server."""

    def __init__(
        self,
        horizon_url: Optional[str] = None,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            horizon_url: Base URL of the Horizon server (defaults to the public network)
            http: Optional shared HTTP client; the caller keeps ownership of it
            timeout: Timeout in seconds for regular (non-streaming) requests
        """
        self.horizon_url = (horizon_url or DEFAULT_PUBLIC_URL).rstrip("/") + "/"
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=DEFAULT_CONNECT_TIMEOUT)
        )

    @classmethod
    def public(cls, **kwargs) -> "HorizonClient":
        return cls(DEFAULT_PUBLIC_URL, **kwargs)

    @classmethod
    def testnet(cls, **kwargs) -> "HorizonClient":
        return cls(DEFAULT_TESTNET_URL, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "HorizonClient":
        """Build a client for the server named by ``HORIZON_URL``."""
        return cls(os.getenv(HORIZON_URL_ENV_VAR), **kwargs)

    async def __aenter__(self) -> "HorizonClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    # Streaming

    def stream_url(self, request: ResourceRequest) -> str:
        """Absolute stream URL for ``request``; starts at ``cursor=now`` when
        the request has no cursor."""
        if "cursor" not in type(request).model_fields:
            return str(httpx.URL(self._resolve(request)).copy_set_param("cursor", CURSOR_NOW))
        if not request.cursor:
            request = request.model_copy(update={"cursor": CURSOR_NOW})
        return self._resolve(request)

    async def stream(
        self,
        request: ResourceRequest,
        handler: RecordHandler,
        cancellation: Optional[CancellationToken] = None,
        reconnect: Optional[ReconnectConfig] = None,
    ) -> None:
        """Stream records for ``request`` to ``handler``, in server order.

        Returns when the server closes the stream (and no reconnect is
        configured or left) or when ``cancellation`` fires.

        Raises:
            RequestBuildError: The request is invalid; nothing was sent
            BadStatusError: The server answered with a non-2xx status
            StreamTransportError: Connecting or reading failed
            DecodeError: A payload could not be decoded
        """
        if not request.streamable:
            raise RequestBuildError(
                f"Unable to build endpoint: {type(request).__name__} cannot be streamed"
            )
        url = self.stream_url(request)

        tracker = CursorTracker(getattr(request, "cursor", None))
        on_payload = request.payload_decoder().bind(handler, tracker.observe)
        stream = ReconnectingStream(
            self.http,
            url,
            on_payload,
            tracker,
            cancellation=cancellation,
            config=reconnect,
            stream_logger=StreamLogger(request.resource),
        )
        await stream.run()

    async def stream_effects(self, handler: RecordHandler,
                             cancellation: Optional[CancellationToken] = None,
                             reconnect: Optional[ReconnectConfig] = None, **filters) -> None:
        await self.stream(EffectRequest(**filters), handler, cancellation, reconnect)

    async def stream_operations(self, handler: RecordHandler,
                                cancellation: Optional[CancellationToken] = None,
                                reconnect: Optional[ReconnectConfig] = None, **filters) -> None:
        await self.stream(OperationRequest(**filters), handler, cancellation, reconnect)

    async def stream_payments(self, handler: RecordHandler,
                              cancellation: Optional[CancellationToken] = None,
                              reconnect: Optional[ReconnectConfig] = None, **filters) -> None:
        request = OperationRequest(**filters).set_payments_endpoint()
        await self.stream(request, handler, cancellation, reconnect)

    async def stream_transactions(self, handler: RecordHandler,
                                  cancellation: Optional[CancellationToken] = None,
                                  reconnect: Optional[ReconnectConfig] = None, **filters) -> None:
        await self.stream(TransactionRequest(**filters), handler, cancellation, reconnect)

    async def stream_ledgers(self, handler: RecordHandler,
                             cancellation: Optional[CancellationToken] = None,
                             reconnect: Optional[ReconnectConfig] = None, **filters) -> None:
        await self.stream(LedgerRequest(**filters), handler, cancellation, reconnect)

    # Regular requests

    async def fetch(self, request: ResourceRequest) -> Union[Page, Any]:
        """Fetch a page of records, or one record for a detail request.

        Raises:
            RequestBuildError: The request is invalid; nothing was sent
            HorizonRequestError: Horizon answered with a problem document
            HorizonError: The request could not be sent
            DecodeError: The body could not be decoded
        """
        return await self._get(self._resolve(request), request)

    async def next_page(self, page: Page) -> Page:
        """Follow the ``next`` link of a page fetched by this client."""
        if page._request is None or not page.next_href:
            raise HorizonError("Page has no next link to follow")
        url = str(httpx.URL(self.horizon_url).join(page.next_href))
        return await self._get(url, page._request)

    async def effects(self, **filters) -> Page:
        return await self.fetch(EffectRequest(**filters))

    async def operations(self, **filters) -> Page:
        return await self.fetch(OperationRequest(**filters))

    async def payments(self, **filters) -> Page:
        return await self.fetch(OperationRequest(**filters).set_payments_endpoint())

    async def transactions(self, **filters) -> Page:
        return await self.fetch(TransactionRequest(**filters))

    async def ledgers(self, **filters) -> Page:
        return await self.fetch(LedgerRequest(**filters))

    async def account_detail(self, account_id: str) -> Account:
        return await self.fetch(AccountRequest(account_id=account_id))

    async def ledger_detail(self, sequence: int) -> Ledger:
        return await self.fetch(LedgerRequest(sequence=sequence))

    async def transaction_detail(self, transaction_hash: str) -> Transaction:
        return await self.fetch(TransactionRequest(transaction_hash=transaction_hash))

    async def operation_detail(self, operation_id: str) -> Any:
        return await self.fetch(OperationRequest(operation_id=operation_id))

    async def submit_transaction(self, transaction_xdr: str) -> TransactionSuccess:
        """Submit a signed transaction envelope.

        Raises:
            HorizonRequestError: The transaction was rejected; see ``result_codes()``
        """
        request = SubmitRequest(transaction_xdr=transaction_xdr)
        self._resolve(request)
        url = str(httpx.URL(self.horizon_url).join(request.resource))

        logger = StreamLogger(request.resource)
        with logger.track_request("POST", url):
            try:
                response = await self.http.post(url, data=request.form(), headers=REQUEST_HEADERS)
            except httpx.HTTPError as e:
                raise HorizonError(
                    f"Error submitting transaction: {e}", url=url, original_error=e
                ) from e
            body = self._read_body(response, url)

        return self._decode(request, body, url)

    # Internals

    def _resolve(self, request: ResourceRequest) -> str:
        try:
            endpoint = request.build_url()
        except RequestBuildError as e:
            raise RequestBuildError(f"Unable to build endpoint: {e.message}", original_error=e) from e
        return str(httpx.URL(self.horizon_url).join(endpoint))

    async def _get(self, url: str, request: ResourceRequest) -> Union[Page, Any]:
        logger = StreamLogger(request.resource)
        with logger.track_request("GET", url):
            try:
                response = await self.http.get(url, headers=REQUEST_HEADERS)
            except httpx.HTTPError as e:
                raise HorizonError(f"Error fetching {url}: {e}", url=url, original_error=e) from e
            body = self._read_body(response, url)

        if request.is_detail:
            return self._decode(request, body, url)

        embedded = body.get("_embedded") or {}
        try:
            records = request.payload_decoder().decode_many(embedded.get("records") or [])
        except DecodeError as e:
            e.url = url
            raise
        page = Page(records=records, links=body.get("_links") or {})
        page._request = request
        return page

    @staticmethod
    def _decode(request: ResourceRequest, body: Dict[str, Any], url: str) -> Any:
        try:
            return request.payload_decoder().decode(body)
        except DecodeError as e:
            e.url = url
            raise

    @staticmethod
    def _read_body(response: httpx.Response, url: str) -> Dict[str, Any]:
        if not response.is_success:
            try:
                problem = response.json()
            except ValueError:
                problem = {}
            if not isinstance(problem, dict):
                problem = {}
            problem.setdefault("status", response.status_code)
            problem.setdefault("title", response.reason_phrase)
            raise HorizonRequestError(response.status_code, problem, url=url)

        try:
            body = response.json()
        except ValueError as e:
            raise DecodeError(UNMARSHAL_STAGE, e, url=url) from e
        if not isinstance(body, dict):
            raise DecodeError(UNMARSHAL_STAGE, ValueError("expected a JSON object"), url=url)
        return body
