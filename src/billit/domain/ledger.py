"""Billing ledger calculations.

Every function here is pure: it works on a snapshot of bills and payments
handed in by the caller, never mutates it, and never reads the clock. Date
bucketing takes the reference date as an argument.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, Iterator, Optional, Sequence

from billit.domain.entities import (
    Bill,
    BillStatus,
    Client,
    ClientRevenue,
    DashboardSummary,
    Payment,
    PaymentSummary,
    ReportSummary,
)

STATUS_FILTER_ALL = "all"

PeriodPredicate = Callable[[date], bool]


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def in_month(reference: date | datetime) -> PeriodPredicate:
    """Predicate matching dates in the calendar month of ``reference``."""
    ref = _as_date(reference)
    return lambda d: d.year == ref.year and d.month == ref.month


def in_year(reference: date | datetime) -> PeriodPredicate:
    """Predicate matching dates in the calendar year of ``reference``."""
    ref = _as_date(reference)
    return lambda d: d.year == ref.year


def total_for_status(bills: Iterable[Bill], status: BillStatus | str) -> int:
    """Sum of bill amounts with the given status."""
    status = BillStatus(status)
    return sum(bill.amount for bill in bills if bill.status == status)


def count_by_status(bills: Iterable[Bill]) -> dict[BillStatus, int]:
    """Number of bills per status, every status present."""
    counts = {status: 0 for status in BillStatus}
    for bill in bills:
        counts[bill.status] += 1
    return counts


def revenue_for_period(bills: Iterable[Bill], period: PeriodPredicate) -> int:
    """Sum of paid bill amounts whose date satisfies ``period``."""
    return sum(
        bill.amount
        for bill in bills
        if bill.status == BillStatus.PAID and period(bill.date)
    )


def average_bill_value(bills: Sequence[Bill], reference: date | datetime) -> int:
    """Yearly paid revenue divided by the number of paid bills.

    Returns 0 when no bill is paid. The quotient is rounded half-up to whole
    paise.
    """
    paid_count = sum(1 for bill in bills if bill.status == BillStatus.PAID)
    if paid_count == 0:
        return 0
    yearly = revenue_for_period(bills, in_year(reference))
    average = Decimal(yearly) / Decimal(paid_count)
    return int(average.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def outstanding(bills: Iterable[Bill]) -> int:
    """Sum of amounts of bills that are unpaid or overdue."""
    return sum(
        bill.amount
        for bill in bills
        if bill.status in (BillStatus.UNPAID, BillStatus.OVERDUE)
    )


def overdue_total(bills: Iterable[Bill]) -> int:
    """Sum of amounts of overdue bills."""
    return total_for_status(bills, BillStatus.OVERDUE)


def total_received(payments: Iterable[Payment]) -> int:
    """Sum of all payment amounts."""
    return sum(payment.amount for payment in payments)


def is_past_due(bill: Bill, today: date | datetime) -> bool:
    """Whether an unpaid bill is dated before ``today``.

    Used only to highlight rows; the stored status is not touched.
    """
    if bill.status == BillStatus.PAID:
        return False
    return bill.date < _as_date(today)


class FilteredView:
    """Lazy, restartable filtered view over a sequence.

    Each iteration re-applies the predicate to the source, so the view
    reflects the source as it is when iterated. Input order is preserved.
    """

    def __init__(self, source: Iterable, predicate: Callable[[object], bool]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator:
        return (item for item in self._source if self._predicate(item))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FilteredView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _matches_text(search_text: str, *values: Optional[str]) -> bool:
    needle = (search_text or "").lower()
    return any(value is not None and needle in value.lower() for value in values)


def filter_bills(
    bills: Iterable[Bill],
    search_text: str = "",
    status_filter: BillStatus | str = STATUS_FILTER_ALL,
) -> FilteredView:
    """Filter bills by search text and status.

    Search text matches the bill number or the client name, case-insensitive.
    A status filter of ``"all"`` matches every status.
    """
    status: Optional[BillStatus] = None
    if status_filter != STATUS_FILTER_ALL:
        status = BillStatus(status_filter)

    def predicate(bill: Bill) -> bool:
        if not _matches_text(search_text, str(bill.id), bill.client_name):
            return False
        return status is None or bill.status == status

    return FilteredView(bills, predicate)


def filter_clients(clients: Iterable[Client], search_text: str = "") -> FilteredView:
    """Filter clients by name, company or tax id, case-insensitive."""
    return FilteredView(
        clients,
        lambda client: _matches_text(
            search_text, client.name, client.company, client.tax_id
        ),
    )


def recent_bills(bills: Iterable[Bill], limit: int = 4) -> list[Bill]:
    """Most recent bills by date, newest first."""
    return sorted(bills, key=lambda bill: (bill.date, bill.id), reverse=True)[:limit]


def revenue_by_client(bills: Iterable[Bill]) -> list[ClientRevenue]:
    """Paid revenue grouped by client display name, largest first."""
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for bill in bills:
        if bill.status != BillStatus.PAID:
            continue
        totals[bill.client_name][0] += bill.amount
        totals[bill.client_name][1] += 1

    results = [
        ClientRevenue(client_name=name, amount=amount, bill_count=count)
        for name, (amount, count) in totals.items()
    ]
    results.sort(key=lambda r: (-r.amount, r.client_name))
    return results


def revenue_by_month(bills: Iterable[Bill]) -> dict[str, int]:
    """Paid revenue keyed by ``YYYY-MM``, in chronological order."""
    totals: dict[str, int] = defaultdict(int)
    for bill in bills:
        if bill.status == BillStatus.PAID:
            totals[bill.date.strftime("%Y-%m")] += bill.amount
    return {key: totals[key] for key in sorted(totals)}


def dashboard_summary(
    bills: Sequence[Bill], client_count: int, reference: date | datetime
) -> DashboardSummary:
    """Build dashboard figures from a bill snapshot."""
    counts = count_by_status(bills)
    return DashboardSummary(
        total_bills=len(bills),
        paid_bills=counts[BillStatus.PAID],
        unpaid_bills=counts[BillStatus.UNPAID],
        overdue_bills=counts[BillStatus.OVERDUE],
        total_clients=client_count,
        monthly_revenue=revenue_for_period(bills, in_month(reference)),
        overdue_amount=overdue_total(bills),
        recent_bills=tuple(recent_bills(bills)),
    )


def report_summary(bills: Sequence[Bill], reference: date | datetime) -> ReportSummary:
    """Build report figures from a bill snapshot."""
    counts = count_by_status(bills)
    paid = counts[BillStatus.PAID]
    return ReportSummary(
        reference=_as_date(reference),
        monthly_revenue=revenue_for_period(bills, in_month(reference)),
        yearly_revenue=revenue_for_period(bills, in_year(reference)),
        total_bills=len(bills),
        paid_bills=paid,
        pending_bills=len(bills) - paid,
        average_bill_value=average_bill_value(bills, reference),
        outstanding=outstanding(bills),
        overdue_amount=overdue_total(bills),
        revenue_by_client=tuple(revenue_by_client(bills)),
        revenue_by_month=revenue_by_month(bills),
    )


def payment_summary(bills: Sequence[Bill], payments: Sequence[Payment]) -> PaymentSummary:
    """Build payment screen figures from bill and payment snapshots."""
    counts = count_by_status(bills)
    return PaymentSummary(
        total_received=total_received(payments),
        payment_count=len(payments),
        outstanding=outstanding(bills),
        outstanding_count=counts[BillStatus.UNPAID] + counts[BillStatus.OVERDUE],
        overdue_amount=overdue_total(bills),
        overdue_count=counts[BillStatus.OVERDUE],
    )
