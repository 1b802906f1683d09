"""
Horizon SDK - asyncio client for the Horizon ledger-data API.

This package provides:
- Request descriptors mapping filters to canonical Horizon endpoints
- Typed records for operations, effects, transactions, ledgers and accounts
- Event streaming over ``text/event-stream`` with cooperative cancellation
- Paged fetches, detail lookups and transaction submission
"""

__version__ = "0.1.0"

from .api.client import HorizonClient
from .errors import (
    BadStatusError,
    DecodeError,
    HorizonError,
    HorizonRequestError,
    RequestBuildError,
    StreamTransportError,
    UnknownRecordTypeError,
    VerificationError,
)
from .records import EFFECTS, OPERATIONS, Account, Ledger, Page, Transaction, TransactionSuccess
from .reliability import ReconnectConfig
from .resources import (
    AccountRequest,
    EffectRequest,
    LedgerRequest,
    OperationRequest,
    Order,
    SubmitRequest,
    TransactionRequest,
)
from .streaming import CancellationToken, StreamSession, run_stream

__all__ = [
    # Main client
    "HorizonClient",

    # Requests
    "Order",
    "EffectRequest",
    "OperationRequest",
    "TransactionRequest",
    "LedgerRequest",
    "AccountRequest",
    "SubmitRequest",

    # Records
    "OPERATIONS",
    "EFFECTS",
    "Transaction",
    "Ledger",
    "Account",
    "TransactionSuccess",
    "Page",

    # Streaming
    "CancellationToken",
    "StreamSession",
    "run_stream",
    "ReconnectConfig",

    # Errors
    "HorizonError",
    "RequestBuildError",
    "BadStatusError",
    "StreamTransportError",
    "DecodeError",
    "UnknownRecordTypeError",
    "HorizonRequestError",
    "VerificationError",
]
