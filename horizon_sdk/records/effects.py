"""
Effect records.

Effects describe the changes an operation made to the ledger. Variants that
share a shape (e.g. signer_created/removed/updated) share one model whose
``type`` literal lists every kind it covers.
"""

from typing import Literal, Optional, Union

from .base import AssetFields, Record
from .registry import RecordRegistry


class EffectBase(Record):
    """Fields common to every effect."""
    account: str = ""
    type: str = ""
    type_i: int = 0
    created_at: str = ""

    def get_type(self) -> str:
        return self.type


EFFECTS: RecordRegistry[EffectBase] = RecordRegistry("effect")


@EFFECTS.register
class AccountCreated(EffectBase):
    type: Literal["account_created"] = "account_created"
    starting_balance: str = ""


@EFFECTS.register
class AccountRemoved(EffectBase):
    type: Literal["account_removed"] = "account_removed"


@EFFECTS.register
class AccountCredited(EffectBase, AssetFields):
    type: Literal["account_credited"] = "account_credited"
    amount: str = ""


@EFFECTS.register
class AccountDebited(EffectBase, AssetFields):
    type: Literal["account_debited"] = "account_debited"
    amount: str = ""


@EFFECTS.register
class AccountThresholdsUpdated(EffectBase):
    type: Literal["account_thresholds_updated"] = "account_thresholds_updated"
    low_threshold: int = 0
    med_threshold: int = 0
    high_threshold: int = 0


@EFFECTS.register
class AccountHomeDomainUpdated(EffectBase):
    type: Literal["account_home_domain_updated"] = "account_home_domain_updated"
    home_domain: str = ""


@EFFECTS.register
class AccountFlagsUpdated(EffectBase):
    type: Literal["account_flags_updated"] = "account_flags_updated"
    auth_required_flag: Optional[bool] = None
    auth_revokable_flag: Optional[bool] = None


@EFFECTS.register
class SignerEffect(EffectBase):
    type: Literal["signer_created", "signer_removed", "signer_updated"] = "signer_created"
    weight: int = 0
    public_key: str = ""
    key: str = ""


@EFFECTS.register
class TrustlineEffect(EffectBase, AssetFields):
    type: Literal["trustline_created", "trustline_removed", "trustline_updated"] = "trustline_created"
    limit: str = ""


@EFFECTS.register
class TrustlineAuthorization(EffectBase):
    type: Literal["trustline_authorized", "trustline_deauthorized"] = "trustline_authorized"
    trustor: str = ""
    asset_type: str = ""
    asset_code: Optional[str] = None


@EFFECTS.register
class Trade(EffectBase):
    type: Literal["trade"] = "trade"
    seller: str = ""
    offer_id: int = 0
    sold_amount: str = ""
    sold_asset_type: str = ""
    sold_asset_code: Optional[str] = None
    sold_asset_issuer: Optional[str] = None
    bought_amount: str = ""
    bought_asset_type: str = ""
    bought_asset_code: Optional[str] = None
    bought_asset_issuer: Optional[str] = None


@EFFECTS.register
class DataEffect(EffectBase):
    type: Literal["data_created", "data_removed", "data_updated"] = "data_created"
    name: str = ""
    value: Optional[str] = None


@EFFECTS.register
class SequenceBumped(EffectBase):
    type: Literal["sequence_bumped"] = "sequence_bumped"
    new_seq: str = ""


Effect = Union[
    AccountCreated,
    AccountRemoved,
    AccountCredited,
    AccountDebited,
    AccountThresholdsUpdated,
    AccountHomeDomainUpdated,
    AccountFlagsUpdated,
    SignerEffect,
    TrustlineEffect,
    TrustlineAuthorization,
    Trade,
    DataEffect,
    SequenceBumped,
]
