from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """HAL link attached to every Horizon resource."""
    model_config = ConfigDict(extra="allow")

    href: str
    templated: bool = False


class Record(BaseModel):
    """Base class for every record returned by Horizon.

    Unknown fields are kept so that newer service versions do not break
    decoding; ``_links`` is exposed as ``links``.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    id: str = ""
    paging_token: str = ""

    def get_paging_token(self) -> str:
        return self.paging_token

    def link(self, name: str) -> Optional[str]:
        found = self.links.get(name)
        return found.href if found else None


class RecordEnvelope(BaseModel):
    """Minimal view of a tagged payload: only the discriminant is read."""
    model_config = ConfigDict(extra="ignore")

    type: str = ""


class AssetFields(BaseModel):
    """Asset triple shared by payments, trustlines and balances."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    asset_type: str = ""
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None

    @property
    def asset(self) -> str:
        if self.asset_type == "native":
            return "native"
        return f"{self.asset_code}:{self.asset_issuer}"
