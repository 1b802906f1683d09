from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .base import Link


class Page(BaseModel):
    """One page of a Horizon collection.

    ``records`` holds decoded records; the HAL ``_links`` of the page are
    kept so the next and previous pages can be followed.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    records: List[Any] = Field(default_factory=list)
    links: Dict[str, Link] = Field(default_factory=dict)

    # Request the page was fetched for; used to decode the following pages
    _request: Any = PrivateAttr(default=None)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def next_href(self) -> Optional[str]:
        link = self.links.get("next")
        return link.href if link else None

    @property
    def prev_href(self) -> Optional[str]:
        link = self.links.get("prev")
        return link.href if link else None

    @property
    def last_paging_token(self) -> Optional[str]:
        if not self.records:
            return None
        return getattr(self.records[-1], "paging_token", None) or None
