"""Unit tests for request descriptors and endpoint building."""

import pytest
from pydantic import ValidationError

from horizon_sdk.errors import RequestBuildError
from horizon_sdk.resources import (
    AccountRequest,
    EffectRequest,
    LedgerRequest,
    OperationRequest,
    Order,
    SubmitRequest,
    TransactionRequest,
    add_query_params,
    count_params,
)

pytestmark = pytest.mark.unit

ACCOUNT = "GCLWGQPMKXQSPF776IU33AH4PZNOOWNAWGGKVTBQMIC5IMKUNP3E6NVU"


class TestHelpers:
    """Test parameter counting and query encoding."""

    def test_count_params(self):
        assert count_params("", 0, None) == 0
        assert count_params("a", 0, "b") == 2
        assert count_params(123) == 1

    def test_query_keys_are_sorted(self):
        assert add_query_params("123456", 30, Order.ASC) == "cursor=123456&limit=30&order=asc"
        assert add_query_params(order="desc", include_failed=True) == "include_failed=true&order=desc"

    def test_empty_query(self):
        assert add_query_params() == ""


class TestEffectRequest:
    """Test effect endpoints."""

    @pytest.mark.parametrize("request_, endpoint", [
        (EffectRequest(), "effects"),
        (EffectRequest(for_account=ACCOUNT), f"accounts/{ACCOUNT}/effects"),
        (EffectRequest(for_ledger=123), "ledgers/123/effects"),
        (EffectRequest(for_operation="123"), "operations/123/effects"),
        (EffectRequest(for_transaction="123"), "transactions/123/effects"),
        (EffectRequest(cursor="123456", limit=30, order=Order.ASC),
         "effects?cursor=123456&limit=30&order=asc"),
    ])
    def test_build_url(self, request_, endpoint):
        assert request_.build_url() == endpoint

    def test_too_many_parameters(self):
        with pytest.raises(RequestBuildError, match="Invalid request. Too many parameters"):
            EffectRequest(for_account=ACCOUNT, for_ledger=123).build_url()

    def test_limit_is_bounded(self):
        with pytest.raises(ValidationError):
            EffectRequest(limit=0)
        with pytest.raises(ValidationError):
            EffectRequest(limit=201)

    def test_descriptors_are_immutable(self):
        request = EffectRequest()
        with pytest.raises(ValidationError):
            request.cursor = "now"


class TestOperationRequest:
    """Test operation and payment endpoints."""

    @pytest.mark.parametrize("request_, endpoint", [
        (OperationRequest(), "operations"),
        (OperationRequest(for_account=ACCOUNT), f"accounts/{ACCOUNT}/operations"),
        (OperationRequest(for_ledger=123), "ledgers/123/operations"),
        (OperationRequest(operation_id="123"), "operations/123"),
        (OperationRequest(for_transaction="123", endpoint="payments"), "transactions/123/payments"),
        (OperationRequest(cursor="123456", limit=30, order=Order.ASC),
         "operations?cursor=123456&limit=30&order=asc"),
        (OperationRequest(cursor="123456", limit=30, order="asc", endpoint="payments"),
         "payments?cursor=123456&limit=30&order=asc"),
        (OperationRequest(for_ledger=5, include_failed=True),
         "ledgers/5/operations?include_failed=true"),
    ])
    def test_build_url(self, request_, endpoint):
        assert request_.build_url() == endpoint

    def test_too_many_parameters(self):
        request = OperationRequest(for_account=ACCOUNT, operation_id="123")
        with pytest.raises(RequestBuildError, match="Invalid request. Too many parameters"):
            request.build_url()

    def test_endpoint_switch_returns_copy(self):
        operations = OperationRequest(for_account=ACCOUNT)
        payments = operations.set_payments_endpoint()
        assert operations.endpoint == "operations"
        assert payments.build_url() == f"accounts/{ACCOUNT}/payments"
        assert payments.set_operations_endpoint().build_url() == f"accounts/{ACCOUNT}/operations"

    def test_unknown_endpoint_is_rejected(self):
        with pytest.raises(ValidationError):
            OperationRequest(endpoint="trades")

    def test_detail(self):
        assert OperationRequest(operation_id="1").is_detail
        assert not OperationRequest().is_detail


class TestTransactionRequest:
    """Test transaction endpoints."""

    @pytest.mark.parametrize("request_, endpoint", [
        (TransactionRequest(), "transactions"),
        (TransactionRequest(for_account=ACCOUNT), f"accounts/{ACCOUNT}/transactions"),
        (TransactionRequest(for_ledger=123), "ledgers/123/transactions"),
        (TransactionRequest(transaction_hash="abc"), "transactions/abc"),
        (TransactionRequest(for_ledger=7, limit=200, include_failed=True),
         "ledgers/7/transactions?include_failed=true&limit=200"),
    ])
    def test_build_url(self, request_, endpoint):
        assert request_.build_url() == endpoint

    def test_too_many_parameters(self):
        with pytest.raises(RequestBuildError, match="Too many parameters"):
            TransactionRequest(for_ledger=1, transaction_hash="abc").build_url()


class TestOtherRequests:
    """Test ledger, account and submission endpoints."""

    def test_ledgers(self):
        assert LedgerRequest().build_url() == "ledgers"
        assert LedgerRequest(sequence=42).build_url() == "ledgers/42"
        assert LedgerRequest(order=Order.DESC, limit=200).build_url() == "ledgers?limit=200&order=desc"
        assert LedgerRequest(sequence=42).is_detail

    def test_account(self):
        assert AccountRequest(account_id=ACCOUNT).build_url() == f"accounts/{ACCOUNT}"
        with pytest.raises(RequestBuildError, match="Too few parameters"):
            AccountRequest().build_url()

    def test_submit(self):
        request = SubmitRequest(transaction_xdr="AAAA+/==")
        assert request.build_url() == "transactions?tx=AAAA%2B%2F%3D%3D"
        assert request.form() == {"tx": "AAAA+/=="}
        assert not request.streamable
        with pytest.raises(RequestBuildError, match="Invalid request. Too few parameters"):
            SubmitRequest().build_url()

    def test_path_segments_are_escaped(self):
        assert EffectRequest(for_operation="a/b").build_url() == "operations/a%2Fb/effects"
