"""
Base request descriptors.

A request descriptor is an immutable, sparse set of filters for one Horizon
resource family. ``build_url()`` maps it to the canonical relative endpoint
(path plus query string). Identifying filters are mutually exclusive; setting
more than one is a build error, raised before any I/O takes place.
"""

from abc import abstractmethod
from enum import Enum
from typing import ClassVar, Dict, Optional, Union
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..config.constants import MAX_PAGE_LIMIT
from ..errors import RequestBuildError
from ..streaming.decoding import PayloadDecoder

TOO_MANY_PARAMETERS = "Invalid request. Too many parameters"
TOO_FEW_PARAMETERS = "Invalid request. Too few parameters"


class Order(str, Enum):
    """Sort order of a collection."""
    ASC = "asc"
    DESC = "desc"


def count_params(*params: Union[str, int, None]) -> int:
    """Count the parameters that are set (non-empty strings, positive numbers)."""
    count = 0
    for param in params:
        if isinstance(param, str) and param:
            count += 1
        elif isinstance(param, int) and not isinstance(param, bool) and param > 0:
            count += 1
    return count


def add_query_params(
    cursor: Optional[str] = None,
    limit: Optional[int] = None,
    order: Optional[Union[Order, str]] = None,
    include_failed: bool = False,
) -> str:
    """Encode paging parameters; unset values are left out, keys are sorted."""
    params: Dict[str, str] = {}
    if cursor:
        params["cursor"] = cursor
    if limit:
        params["limit"] = str(limit)
    if order:
        params["order"] = Order(order).value
    if include_failed:
        params["include_failed"] = "true"
    return urlencode(sorted(params.items()))


def segment(value: Union[str, int]) -> str:
    """Escape one path segment."""
    return quote(str(value), safe="")


class ResourceRequest(BaseModel):
    """Base class for every request descriptor."""
    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=False)

    resource: ClassVar[str] = ""
    streamable: ClassVar[bool] = True

    @abstractmethod
    def build_url(self) -> str:
        """Return the relative endpoint for this request.

        Raises:
            RequestBuildError: Filters are contradictory or incomplete
        """
        pass

    @abstractmethod
    def payload_decoder(self) -> PayloadDecoder:
        """Decoder for the records this request returns."""
        pass

    @property
    def is_detail(self) -> bool:
        """True when the endpoint names a single record instead of a collection."""
        return False

    @staticmethod
    def _validated(endpoint: str) -> str:
        try:
            httpx.URL(endpoint)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"failed to parse endpoint: {e}") from e
        return endpoint


class PagedRequest(ResourceRequest):
    """Request over an ordered collection, with paging parameters."""

    cursor: Optional[str] = None
    limit: Optional[int] = Field(None, ge=1, le=MAX_PAGE_LIMIT)
    order: Optional[Order] = None

    def _with_query(self, endpoint: str, include_failed: bool = False) -> str:
        query = add_query_params(self.cursor, self.limit, self.order, include_failed)
        if query:
            endpoint = f"{endpoint}?{query}"
        return self._validated(endpoint)

    @staticmethod
    def _ensure_single_filter(*filters: Union[str, int, None]) -> None:
        if count_params(*filters) > 1:
            raise RequestBuildError(TOO_MANY_PARAMETERS)
