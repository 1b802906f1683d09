"""Shared pytest fixtures for Horizon SDK tests."""

import json
from typing import Any, Dict

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file for tests
load_dotenv()

from tests.helpers.horizon_data import CREDITED_ACCOUNT, FUNDER

HORIZON_URL = "https://localhost/"


@pytest.fixture
def horizon_url():
    return HORIZON_URL


@pytest.fixture
def account_credited_effect() -> Dict[str, Any]:
    """Effect payload as streamed by the testnet."""
    return {
        "_links": {
            "operation": {"href": "https://horizon-testnet.stellar.org/operations/2531135896703017"},
            "succeeds": {"href": "https://horizon-testnet.stellar.org/effects?order=desc&cursor=2531135896703017-1"},
            "precedes": {"href": "https://horizon-testnet.stellar.org/effects?order=asc&cursor=2531135896703017-1"},
        },
        "id": "0002531135896703017-0000000001",
        "paging_token": "2531135896703017-1",
        "account": CREDITED_ACCOUNT,
        "type": "account_credited",
        "type_i": 2,
        "created_at": "2019-04-03T10:14:17Z",
        "asset_type": "credit_alphanum4",
        "asset_code": "qwop",
        "asset_issuer": "GBM4HXXNDBWWQBXOL4QCTZIUQAP6XFUI3FPINUGUPBMULMTEHJPIKX6T",
        "amount": "0.0460000",
    }


@pytest.fixture
def create_account_operation() -> Dict[str, Any]:
    """Operation payload as streamed by the testnet."""
    return {
        "_links": {
            "self": {"href": "https://horizon-testnet.stellar.org/operations/4934917427201"},
            "transaction": {"href": "https://horizon-testnet.stellar.org/transactions/1c1449106a54cccd8a2ec2094815ad9db30ae54c69c3309dd08d13fdb8c749de"},
        },
        "id": "4934917427201",
        "paging_token": "4934917427201",
        "transaction_successful": True,
        "source_account": FUNDER,
        "type": "create_account",
        "type_i": 0,
        "created_at": "2019-02-27T11:32:39Z",
        "transaction_hash": "1c1449106a54cccd8a2ec2094815ad9db30ae54c69c3309dd08d13fdb8c749de",
        "starting_balance": "10000.0000000",
        "funder": FUNDER,
        "account": "GDBLBBDIUULY3HGIKXNK6WVBISY7DCNCDA45EL7NTXWX5R4UZ26HGMGS",
    }


@pytest.fixture
def payment_operation(create_account_operation) -> Dict[str, Any]:
    payment = {
        key: value for key, value in create_account_operation.items()
        if key not in ("starting_balance", "funder", "account")
    }
    payment.update({
        "id": "4934917427202",
        "paging_token": "4934917427202",
        "type": "payment",
        "type_i": 1,
        "asset_type": "native",
        "from": FUNDER,
        "to": CREDITED_ACCOUNT,
        "amount": "25.0000000",
    })
    return payment


@pytest.fixture
def effect_stream_body(account_credited_effect) -> bytes:
    """A single event without the closing blank line."""
    return b"data: " + json.dumps(account_credited_effect).encode() + b"\n"
