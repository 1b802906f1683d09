"""Request descriptors for Horizon resources."""

from .accounts import AccountRequest
from .base import (
    TOO_FEW_PARAMETERS,
    TOO_MANY_PARAMETERS,
    Order,
    PagedRequest,
    ResourceRequest,
    add_query_params,
    count_params,
)
from .effects import EFFECT_DISPATCH_STAGE, EffectRequest
from .ledgers import LedgerRequest
from .operations import OperationRequest
from .submit import SubmitRequest
from .transactions import TransactionRequest

__all__ = [
    "Order",
    "ResourceRequest",
    "PagedRequest",
    "EffectRequest",
    "OperationRequest",
    "TransactionRequest",
    "LedgerRequest",
    "AccountRequest",
    "SubmitRequest",
    "add_query_params",
    "count_params",
    "TOO_MANY_PARAMETERS",
    "TOO_FEW_PARAMETERS",
    "EFFECT_DISPATCH_STAGE",
]
