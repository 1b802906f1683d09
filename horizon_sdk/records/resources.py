"""Untagged Horizon resources: transactions, ledgers and accounts."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import AssetFields, Link, Record


class Transaction(Record):
    successful: bool = True
    hash: str = ""
    ledger: int = 0
    created_at: str = ""
    source_account: str = ""
    source_account_sequence: str = ""
    fee_paid: int = 0
    fee_charged: Optional[int] = None
    max_fee: Optional[int] = None
    operation_count: int = 0
    envelope_xdr: str = ""
    result_xdr: str = ""
    result_meta_xdr: str = ""
    fee_meta_xdr: str = ""
    memo_type: str = ""
    memo: Optional[str] = None
    signatures: List[str] = Field(default_factory=list)
    valid_after: Optional[str] = None
    valid_before: Optional[str] = None


class Ledger(Record):
    hash: str = ""
    prev_hash: str = ""
    sequence: int = 0
    successful_transaction_count: int = 0
    failed_transaction_count: Optional[int] = None
    operation_count: int = 0
    closed_at: str = ""
    total_coins: str = ""
    fee_pool: str = ""
    base_fee_in_stroops: int = 0
    base_reserve_in_stroops: int = 0
    max_tx_set_size: int = 0
    protocol_version: int = 0
    header_xdr: str = ""


class Balance(AssetFields):
    balance: str = ""
    limit: Optional[str] = None
    buying_liabilities: Optional[str] = None
    selling_liabilities: Optional[str] = None


class Signer(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str = ""
    weight: int = 0
    type: str = ""


class Thresholds(BaseModel):
    low_threshold: int = 0
    med_threshold: int = 0
    high_threshold: int = 0


class AccountFlags(BaseModel):
    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False


class Account(Record):
    account_id: str = ""
    sequence: str = ""
    subentry_count: int = 0
    inflation_destination: Optional[str] = None
    home_domain: Optional[str] = None
    last_modified_ledger: int = 0
    thresholds: Thresholds = Field(default_factory=Thresholds)
    flags: AccountFlags = Field(default_factory=AccountFlags)
    balances: List[Balance] = Field(default_factory=list)
    signers: List[Signer] = Field(default_factory=list)
    data: Dict[str, str] = Field(default_factory=dict)

    def sequence_number(self) -> int:
        return int(self.sequence or 0)

    def native_balance(self) -> Optional[str]:
        for balance in self.balances:
            if balance.asset_type == "native":
                return balance.balance
        return None


class TransactionSuccess(BaseModel):
    """Response body of a successful transaction submission."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    hash: str = ""
    ledger: int = 0
    envelope_xdr: str = ""
    result_xdr: str = ""
    result_meta_xdr: str = ""

    def summary(self) -> str:
        return f"transaction {self.hash} included in ledger {self.ledger}"
