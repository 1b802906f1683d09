"""
Operation records.

Every operation shares the fields of OperationBase; the ``type`` field selects
the concrete variant. Variants are registered in OPERATIONS and collected in
the ``Operation`` union for exhaustive handling.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .base import AssetFields, Record
from .registry import RecordRegistry


class OperationBase(Record):
    """Fields common to every operation."""
    transaction_successful: Optional[bool] = None
    source_account: str = ""
    type: str = ""
    type_i: int = 0
    created_at: str = ""
    transaction_hash: str = ""

    def get_type(self) -> str:
        return self.type


OPERATIONS: RecordRegistry[OperationBase] = RecordRegistry("operation")


class Price(BaseModel):
    n: int
    d: int


class OfferFields(BaseModel):
    amount: str = ""
    price: str = ""
    price_r: Optional[Price] = None
    buying_asset_type: str = ""
    buying_asset_code: Optional[str] = None
    buying_asset_issuer: Optional[str] = None
    selling_asset_type: str = ""
    selling_asset_code: Optional[str] = None
    selling_asset_issuer: Optional[str] = None


@OPERATIONS.register
class CreateAccount(OperationBase):
    type: Literal["create_account"] = "create_account"
    starting_balance: str = ""
    funder: str = ""
    account: str = ""


@OPERATIONS.register
class Payment(OperationBase, AssetFields):
    type: Literal["payment"] = "payment"
    from_: str = Field("", alias="from")
    to: str = ""
    amount: str = ""


@OPERATIONS.register
class PathPayment(OperationBase, AssetFields):
    type: Literal["path_payment"] = "path_payment"
    from_: str = Field("", alias="from")
    to: str = ""
    amount: str = ""
    path: List[AssetFields] = Field(default_factory=list)
    source_amount: str = ""
    source_max: str = ""
    source_asset_type: str = ""
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None


@OPERATIONS.register
class ManageSellOffer(OperationBase, OfferFields):
    type: Literal["manage_offer"] = "manage_offer"
    offer_id: int = 0


@OPERATIONS.register
class ManageBuyOffer(OperationBase, OfferFields):
    type: Literal["manage_buy_offer"] = "manage_buy_offer"
    offer_id: int = 0


@OPERATIONS.register
class CreatePassiveSellOffer(OperationBase, OfferFields):
    type: Literal["create_passive_offer"] = "create_passive_offer"


@OPERATIONS.register
class SetOptions(OperationBase):
    type: Literal["set_options"] = "set_options"
    home_domain: Optional[str] = None
    inflation_dest: Optional[str] = None
    master_key_weight: Optional[int] = None
    signer_key: Optional[str] = None
    signer_weight: Optional[int] = None
    set_flags: List[int] = Field(default_factory=list)
    set_flags_s: List[str] = Field(default_factory=list)
    clear_flags: List[int] = Field(default_factory=list)
    clear_flags_s: List[str] = Field(default_factory=list)
    low_threshold: Optional[int] = None
    med_threshold: Optional[int] = None
    high_threshold: Optional[int] = None


@OPERATIONS.register
class ChangeTrust(OperationBase, AssetFields):
    type: Literal["change_trust"] = "change_trust"
    limit: str = ""
    trustee: str = ""
    trustor: str = ""


@OPERATIONS.register
class AllowTrust(OperationBase, AssetFields):
    type: Literal["allow_trust"] = "allow_trust"
    trustee: str = ""
    trustor: str = ""
    authorize: bool = False


@OPERATIONS.register
class AccountMerge(OperationBase):
    type: Literal["account_merge"] = "account_merge"
    account: str = ""
    into: str = ""


@OPERATIONS.register
class Inflation(OperationBase):
    type: Literal["inflation"] = "inflation"


@OPERATIONS.register
class ManageData(OperationBase):
    type: Literal["manage_data"] = "manage_data"
    name: str = ""
    value: Optional[str] = None


@OPERATIONS.register
class BumpSequence(OperationBase):
    type: Literal["bump_sequence"] = "bump_sequence"
    bump_to: str = ""


Operation = Union[
    CreateAccount,
    Payment,
    PathPayment,
    ManageSellOffer,
    ManageBuyOffer,
    CreatePassiveSellOffer,
    SetOptions,
    ChangeTrust,
    AllowTrust,
    AccountMerge,
    Inflation,
    ManageData,
    BumpSequence,
]
