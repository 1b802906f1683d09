"""CLI entry point for Horizon SDK."""

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, Optional

from .api.client import HorizonClient
from .config.constants import HORIZON_URL_ENV_VAR
from .errors import HorizonError, HorizonRequestError, VerificationError
from .resources import (
    EffectRequest,
    LedgerRequest,
    OperationRequest,
    ResourceRequest,
    TransactionRequest,
)
from .streaming.cancellation import CancellationToken
from .verify import LedgerReport, LedgerVerifier

STREAM_RESOURCES = ("effects", "operations", "payments", "transactions", "ledgers")


def build_stream_request(resource: str, account: Optional[str] = None,
                         ledger: Optional[int] = None,
                         cursor: Optional[str] = None) -> ResourceRequest:
    """Map CLI filters to the request descriptor for ``resource``."""
    filters: Dict[str, Any] = {"cursor": cursor}
    if resource == "ledgers":
        if account or ledger:
            raise HorizonError("Ledger streams take no --account/--ledger filter")
        return LedgerRequest(**filters)

    if account:
        filters["for_account"] = account
    if ledger:
        filters["for_ledger"] = ledger

    if resource == "effects":
        return EffectRequest(**filters)
    if resource == "transactions":
        return TransactionRequest(**filters)
    request = OperationRequest(**filters)
    if resource == "payments":
        request = request.set_payments_endpoint()
    return request


def describe_record(record: Any) -> str:
    """One-line summary of a streamed record."""
    kind = getattr(record, "type", None) or type(record).__name__
    fields = record.model_dump(exclude={"links"}, exclude_none=True, by_alias=True)
    return f"{record.paging_token} {kind} {json.dumps(fields, sort_keys=True)}"


async def stream_records(url: Optional[str], resource: str, account: Optional[str] = None,
                         ledger: Optional[int] = None, cursor: Optional[str] = None,
                         seconds: Optional[float] = None):
    """Print records from a stream until it closes or ``seconds`` elapse."""
    request = build_stream_request(resource, account, ledger, cursor)
    token = CancellationToken()
    if seconds:
        token.cancel_after(seconds)

    async with HorizonClient(url) as client:
        print(f"Streaming {resource} from {client.stream_url(request)}\n")
        try:
            await client.stream(request, lambda record: print(describe_record(record)), token)
        finally:
            token.close()


async def submit(url: Optional[str], transaction_xdr: str):
    """Submit a transaction and print the result or the problem document."""
    async with HorizonClient(url) as client:
        try:
            result = await client.submit_transaction(transaction_xdr)
        except HorizonRequestError as e:
            print(f"Type: {e.problem_type}")
            print(f"Title: {e.problem.get('title')}")
            print(f"Status: {e.status_code}")
            print(f"Detail: {e.problem.get('detail')}")
            if "result_codes" in e.extras:
                print(f"Result codes: {e.result_codes()}")
            for key in ("result_xdr", "envelope_xdr"):
                if key in e.extras:
                    print(f"{key}: {e.extras[key]}")
            raise
        print(result.summary())


async def verify(url: Optional[str], start: int, count: int):
    """Check ledger data consistency."""
    def report(ledger: LedgerReport):
        status = "ok" if ledger.ok else "FAILED"
        print(f"Checking ledger: {ledger.sequence} "
              f"(successful={ledger.successful} failed={ledger.failed}) {status}")

    async with HorizonClient(url) as client:
        print(f"{client.horizon_url}: Checking {count} ledgers\n")
        try:
            await LedgerVerifier(client).run(start=start, count=count, on_ledger=report)
        except VerificationError as e:
            for problem in e.details:
                print(problem)
            raise
        print("Done")


def main():
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="Horizon SDK CLI")
    parser.add_argument('--url', default=os.getenv(HORIZON_URL_ENV_VAR),
                        help=f'Horizon server URL (default: ${HORIZON_URL_ENV_VAR} or the public network)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Stream command
    stream_parser = subparsers.add_parser('stream', help='Stream records from Horizon')
    stream_parser.add_argument('resource', choices=STREAM_RESOURCES, help='Resource to stream')
    stream_parser.add_argument('--account', help='Only records for this account')
    stream_parser.add_argument('--ledger', type=int, help='Only records for this ledger')
    stream_parser.add_argument('--cursor', help='Start after this paging token (default: now)')
    stream_parser.add_argument('--seconds', type=float, help='Stop streaming after this many seconds')

    # Submit command
    submit_parser = subparsers.add_parser('submit', help='Submit a signed transaction')
    submit_parser.add_argument('transaction_xdr', help='Base64 transaction envelope')

    # Verify command
    verify_parser = subparsers.add_parser('verify', help='Check ledger data consistency')
    verify_parser.add_argument('--start', type=int, default=0,
                               help='Sequence of the start ledger (default: latest)')
    verify_parser.add_argument('--count', type=int, default=10000, help='Number of ledgers to check')

    args = parser.parse_args()

    try:
        if args.command == 'stream':
            asyncio.run(stream_records(
                args.url,
                args.resource,
                args.account,
                args.ledger,
                args.cursor,
                args.seconds,
            ))
        elif args.command == 'submit':
            asyncio.run(submit(args.url, args.transaction_xdr))
        elif args.command == 'verify':
            asyncio.run(verify(args.url, args.start, args.count))
        else:
            parser.print_help()
    except HorizonError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
