"""
Error types for the Horizon client.

All errors raised by the SDK derive from HorizonError so integrators can
catch the whole family at once, or pattern-match on the concrete class:

- RequestBuildError: contradictory or incomplete request descriptor (no I/O happened)
- BadStatusError: the stream endpoint answered with a non-2xx status
- StreamTransportError: connection or read failure on the stream
- DecodeError: a streamed payload could not be turned into a record
- HorizonRequestError: a regular (non-stream) request returned a problem document
"""

from typing import Any, Dict, List, Optional

import httpx


class HorizonError(Exception):
    """
    Base exception for Horizon client errors.

    Attributes:
        message: Error message
        url: URL of the request that failed, if any
        status_code: HTTP status code if applicable
        is_retryable: Whether repeating the request may succeed
        original_error: The original exception if wrapped
    """

    # Status codes worth repeating a request for
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error
        self.is_retryable = self._classify_retryable()

    def _classify_retryable(self) -> bool:
        if self.status_code is not None:
            return self.status_code in self.RETRYABLE_STATUS_CODES
        return isinstance(self.original_error, (httpx.TimeoutException, httpx.ConnectError))


class RequestBuildError(HorizonError):
    """Raised when a request descriptor cannot be turned into an endpoint."""


class BadStatusError(HorizonError):
    """Raised when the stream endpoint responds with a non-2xx status."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(
            f"Got bad HTTP status code {status_code}",
            url=url,
            status_code=status_code,
        )


class StreamTransportError(HorizonError):
    """Raised when the stream connection cannot be opened or read."""


class UnknownRecordTypeError(HorizonError):
    """Raised when a discriminant has no registered record type."""

    def __init__(self, kind: str, registry: str):
        super().__init__(f"Unknown {registry} type: {kind!r}")
        self.kind = kind
        self.registry = registry


class DecodeError(HorizonError):
    """
    Raised when a payload cannot be decoded.

    The message is prefixed with the stage that failed, e.g.
    "Error unmarshaling data: ..." or
    "Unmarshaling to the correct operation type: ...".
    """

    def __init__(self, stage: str, cause: BaseException, url: Optional[str] = None):
        super().__init__(f"{stage}: {cause}", url=url, original_error=cause)
        self.stage = stage


class HorizonRequestError(HorizonError):
    """
    Raised when a regular request returns a problem document.

    Horizon describes failures with RFC 7807 style problem documents; the
    raw document is kept in ``problem``.
    """

    def __init__(self, status_code: int, problem: Dict[str, Any], url: Optional[str] = None):
        title = problem.get("title") or "Horizon request failed"
        detail = problem.get("detail")
        message = f"{title} (status {status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, url=url, status_code=status_code)
        self.problem = problem

    @property
    def problem_type(self) -> Optional[str]:
        return self.problem.get("type")

    @property
    def extras(self) -> Dict[str, Any]:
        return self.problem.get("extras") or {}

    def result_codes(self) -> Dict[str, Any]:
        """Return the transaction and operation result codes of a failed submission."""
        codes = self.extras.get("result_codes")
        if codes is None:
            raise HorizonError("Problem document has no result codes", url=self.url)
        return {
            "transaction": codes.get("transaction"),
            "operations": list(codes.get("operations") or []),
        }

    def result_xdr(self) -> str:
        result = self.extras.get("result_xdr")
        if result is None:
            raise HorizonError("Problem document has no result XDR", url=self.url)
        return result

    def envelope_xdr(self) -> str:
        envelope = self.extras.get("envelope_xdr")
        if envelope is None:
            raise HorizonError("Problem document has no envelope XDR", url=self.url)
        return envelope


class VerificationError(HorizonError):
    """Raised by the consistency checker when Horizon data does not add up."""

    def __init__(self, message: str, details: Optional[List[str]] = None):
        super().__init__(message)
        self.details = details or []
