"""
Ledger consistency checks against a Horizon server.

Ledgers are walked one at a time in descending order from the start
ledger. For each ledger the transactions are listed (failed ones included)
and counted against the ledger's successful/failed counters. Each
transaction's ``result_xdr`` must agree with its ``successful`` flag, and
its operation page is counted against ``operation_count``.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from stellar_sdk.xdr import TransactionResult, TransactionResultCode

from .api.client import HorizonClient
from .config.constants import MAX_PAGE_LIMIT
from .errors import VerificationError
from .records.resources import Ledger, Transaction
from .resources import Order

logger = logging.getLogger(__name__)

# Per-transaction requests in flight at once, below httpx's default pool size
MAX_CONCURRENT_CHECKS = 20

SUCCESS_CODES = (
    TransactionResultCode.txSUCCESS,
    TransactionResultCode.txFEE_BUMP_INNER_SUCCESS,
)


@dataclass
class LedgerReport:
    """Outcome of checking a single ledger."""
    sequence: int
    successful: int = 0
    failed: int = 0
    problems: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems


def result_succeeded(result_xdr: str) -> Optional[bool]:
    """Whether a base64 TransactionResult reports success.

    Returns:
        None when ``result_xdr`` is empty or cannot be decoded
    """
    if not result_xdr:
        return None
    try:
        result = TransactionResult.from_xdr(result_xdr)
    except (ValueError, EOFError) as e:
        logger.debug(f"Skipping undecodable result XDR: {e}")
        return None
    return result.result.code in SUCCESS_CODES


class LedgerVerifier:
    """Checks Horizon ledger data for internal consistency."""

    def __init__(self, client: HorizonClient, max_concurrency: int = MAX_CONCURRENT_CHECKS):
        self.client = client
        self._limit = asyncio.Semaphore(max_concurrency)

    async def check_transaction(self, transaction: Transaction) -> Optional[str]:
        succeeded = result_succeeded(transaction.result_xdr)
        if succeeded is not None and succeeded != transaction.successful:
            return f"Corrupted data! {transaction.hash} {transaction.result_xdr}"

        async with self._limit:
            page = await self.client.operations(
                for_transaction=transaction.hash, limit=MAX_PAGE_LIMIT, include_failed=True
            )
        if len(page) != transaction.operation_count:
            return (
                f"Corrupted data! {transaction.hash} operations count "
                f"{len(page)} vs {transaction.operation_count}"
            )
        return None

    async def check_ledger(self, ledger: Ledger) -> LedgerReport:
        report = LedgerReport(sequence=ledger.sequence)
        page = await self.client.transactions(
            for_ledger=ledger.sequence, limit=MAX_PAGE_LIMIT, include_failed=True
        )

        for transaction in page:
            if transaction.successful:
                report.successful += 1
            else:
                report.failed += 1

        results = await asyncio.gather(*(self.check_transaction(tx) for tx in page))
        report.problems.extend(problem for problem in results if problem)

        failed_count = ledger.failed_transaction_count or 0
        if (report.successful != ledger.successful_transaction_count
                or report.failed != failed_count):
            report.problems.append(f"Invalid ledger counters {ledger.sequence}")
        return report

    async def run(
        self,
        start: int = 0,
        count: int = 10000,
        on_ledger: Optional[Callable[[LedgerReport], None]] = None,
    ) -> List[LedgerReport]:
        """Check ``count`` ledgers, starting at ``start`` (latest when 0).

        Raises:
            VerificationError: At least one ledger is inconsistent
        """
        cursor = None
        if start:
            # The cursor is exclusive; start from the ledger above
            ledger = await self.client.ledger_detail(start + 1)
            cursor = ledger.get_paging_token()

        logger.info(f"Checking {count} ledgers starting from cursor {cursor!r}")
        reports: List[LedgerReport] = []
        while len(reports) < count:
            page = await self.client.ledgers(cursor=cursor, limit=MAX_PAGE_LIMIT, order=Order.DESC)
            if not len(page):
                break

            for ledger in list(page)[:count - len(reports)]:
                report = await self.check_ledger(ledger)
                reports.append(report)
                if on_ledger is not None:
                    on_ledger(report)
            cursor = page.last_paging_token

        problems = [problem for report in reports for problem in report.problems]
        if problems:
            raise VerificationError(
                f"{len(problems)} consistency problem(s) found", details=problems
            )
        return reports
