"""Domain records returned by Horizon.

Tagged families (operations, effects) are decoded through their registries;
transactions, ledgers and accounts have a single shape.
"""

from .base import AssetFields, Link, Record, RecordEnvelope
from .effects import (
    EFFECTS,
    AccountCreated,
    AccountCredited,
    AccountDebited,
    AccountFlagsUpdated,
    AccountHomeDomainUpdated,
    AccountRemoved,
    AccountThresholdsUpdated,
    DataEffect,
    Effect,
    EffectBase,
    SequenceBumped,
    SignerEffect,
    Trade,
    TrustlineAuthorization,
    TrustlineEffect,
)
from .operations import (
    OPERATIONS,
    AccountMerge,
    AllowTrust,
    BumpSequence,
    ChangeTrust,
    CreateAccount,
    CreatePassiveSellOffer,
    Inflation,
    ManageBuyOffer,
    ManageData,
    ManageSellOffer,
    Operation,
    OperationBase,
    PathPayment,
    Payment,
    Price,
    SetOptions,
)
from .page import Page
from .registry import RecordRegistry
from .resources import Account, Balance, Ledger, Signer, Transaction, TransactionSuccess

__all__ = [
    # Base
    "AssetFields",
    "Link",
    "Record",
    "RecordEnvelope",
    "RecordRegistry",
    "Page",

    # Effects
    "EFFECTS",
    "Effect",
    "EffectBase",
    "AccountCreated",
    "AccountRemoved",
    "AccountCredited",
    "AccountDebited",
    "AccountThresholdsUpdated",
    "AccountHomeDomainUpdated",
    "AccountFlagsUpdated",
    "SignerEffect",
    "TrustlineEffect",
    "TrustlineAuthorization",
    "Trade",
    "DataEffect",
    "SequenceBumped",

    # Operations
    "OPERATIONS",
    "Operation",
    "OperationBase",
    "CreateAccount",
    "Payment",
    "PathPayment",
    "ManageSellOffer",
    "ManageBuyOffer",
    "CreatePassiveSellOffer",
    "SetOptions",
    "ChangeTrust",
    "AllowTrust",
    "AccountMerge",
    "Inflation",
    "ManageData",
    "BumpSequence",
    "Price",

    # Untagged resources
    "Account",
    "Balance",
    "Ledger",
    "Signer",
    "Transaction",
    "TransactionSuccess",
]
