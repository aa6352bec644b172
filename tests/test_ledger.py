"""Tests for the billing ledger calculations."""

from datetime import date, datetime

import pytest

from billit.domain import ledger
from billit.domain.entities import BillStatus, Client


REFERENCE = date(2024, 3, 20)


@pytest.fixture
def mixed_bills(make_bill):
    return [
        make_bill(1, 500000, "paid", date(2024, 3, 2), "Acme"),
        make_bill(2, 300000, "unpaid", date(2024, 3, 5), "Acme"),
        make_bill(3, 120000, "overdue", date(2024, 1, 9), "Sharma Logistics"),
        make_bill(4, 250000, "paid", date(2024, 2, 14), "Sharma Logistics"),
        make_bill(5, 80000, "paid", date(2023, 12, 30), "Acme"),
    ]


class TestStatusTotals:
    """Tests for status bucket sums."""

    def test_status_buckets_partition_total(self, mixed_bills):
        total = sum(b.amount for b in mixed_bills)
        buckets = sum(ledger.total_for_status(mixed_bills, s) for s in BillStatus)
        assert buckets == total

    def test_total_for_status_accepts_string(self, mixed_bills):
        assert ledger.total_for_status(mixed_bills, "paid") == 830000
        assert ledger.total_for_status(mixed_bills, BillStatus.UNPAID) == 300000

    def test_total_for_status_empty(self):
        assert ledger.total_for_status([], BillStatus.PAID) == 0

    def test_outstanding_and_overdue(self, mixed_bills):
        assert ledger.outstanding(mixed_bills) == 420000
        assert ledger.overdue_total(mixed_bills) == 120000

    def test_count_by_status_has_every_status(self, make_bill):
        counts = ledger.count_by_status([make_bill(1, 100, "paid")])
        assert counts == {
            BillStatus.UNPAID: 0,
            BillStatus.PAID: 1,
            BillStatus.OVERDUE: 0,
        }


class TestRevenue:
    """Tests for period revenue and averages."""

    def test_revenue_this_month_counts_paid_only(self, mixed_bills):
        assert ledger.revenue_for_period(mixed_bills, ledger.in_month(REFERENCE)) == 500000

    def test_revenue_this_year(self, mixed_bills):
        assert ledger.revenue_for_period(mixed_bills, ledger.in_year(REFERENCE)) == 750000

    def test_month_predicate_checks_year(self, make_bill):
        bills = [make_bill(1, 1000, "paid", date(2023, 3, 20))]
        assert ledger.revenue_for_period(bills, ledger.in_month(REFERENCE)) == 0

    def test_predicates_accept_datetime_reference(self, mixed_bills):
        now = datetime(2024, 3, 20, 23, 59)
        assert ledger.revenue_for_period(mixed_bills, ledger.in_month(now)) == 500000

    def test_average_of_no_bills_is_zero(self):
        assert ledger.average_bill_value([], REFERENCE) == 0

    def test_average_with_no_paid_bills_is_zero(self, make_bill):
        bills = [make_bill(1, 5000, "unpaid"), make_bill(2, 7000, "overdue")]
        assert ledger.average_bill_value(bills, REFERENCE) == 0

    def test_average_of_single_paid_bill(self, make_bill):
        bills = [make_bill(1, 1000, "paid")]
        assert ledger.average_bill_value(bills, REFERENCE) == 1000

    def test_average_is_yearly_revenue_over_paid_count(self, mixed_bills):
        # 750000 this year across 3 paid bills (one from last year)
        assert ledger.average_bill_value(mixed_bills, REFERENCE) == 250000

    def test_average_rounds_half_up(self, make_bill):
        bills = [make_bill(1, 1, "paid"), make_bill(2, 0, "paid")]
        assert ledger.average_bill_value(bills, REFERENCE) == 1

    def test_total_received(self, make_payment):
        payments = [make_payment(1, 1200), make_payment(2, 800)]
        assert ledger.total_received(payments) == 2000

    def test_total_received_empty(self):
        assert ledger.total_received([]) == 0

    def test_scenario_paid_and_unpaid_this_month(self, make_bill):
        bills = [
            make_bill(1, 5000, "paid", REFERENCE),
            make_bill(2, 3000, "unpaid", REFERENCE),
        ]
        assert ledger.outstanding(bills) == 3000
        assert ledger.total_for_status(bills, "paid") == 5000
        assert ledger.revenue_for_period(bills, ledger.in_month(REFERENCE)) == 5000


class TestFilterBills:
    """Tests for bill search and status filtering."""

    def test_empty_search_and_all_is_identity(self, mixed_bills):
        assert list(ledger.filter_bills(mixed_bills, "", "all")) == mixed_bills

    def test_filter_is_idempotent(self, mixed_bills):
        once = ledger.filter_bills(mixed_bills, "acme", "paid")
        twice = ledger.filter_bills(once, "acme", "paid")
        assert list(once) == list(twice)
        assert [b.id for b in once] == [1, 5]

    def test_search_is_case_insensitive_on_client(self, mixed_bills):
        result = ledger.filter_bills(mixed_bills, "SHARMA")
        assert [b.id for b in result] == [3, 4]

    def test_search_matches_bill_number(self, mixed_bills):
        result = ledger.filter_bills(mixed_bills, "4")
        assert [b.id for b in result] == [4]

    def test_status_and_search_combine(self, mixed_bills):
        result = ledger.filter_bills(mixed_bills, "sharma", BillStatus.OVERDUE)
        assert [b.id for b in result] == [3]

    def test_order_is_preserved(self, make_bill):
        bills = [make_bill(9, 1), make_bill(2, 1), make_bill(5, 1)]
        assert [b.id for b in ledger.filter_bills(bills)] == [9, 2, 5]

    def test_view_is_restartable_and_does_not_mutate(self, mixed_bills):
        original = list(mixed_bills)
        view = ledger.filter_bills(mixed_bills, "", "unpaid")
        assert [b.id for b in view] == [2]
        assert [b.id for b in view] == [2]
        assert len(view) == 1
        assert mixed_bills == original

    def test_view_is_lazy(self, make_bill):
        bills = [make_bill(1, 10, "paid")]
        view = ledger.filter_bills(bills, "", "paid")
        bills.append(make_bill(2, 20, "paid"))
        assert [b.id for b in view] == [1, 2]

    def test_empty_view_is_falsy(self, mixed_bills):
        assert not ledger.filter_bills(mixed_bills, "nobody")

    def test_unknown_status_raises(self, mixed_bills):
        with pytest.raises(ValueError):
            ledger.filter_bills(mixed_bills, "", "cancelled")


class TestFilterClients:
    """Tests for client search."""

    def _client(self, id, name, company=None, tax_id=None):
        return Client(
            id=id,
            name=name,
            company=company,
            contact=None,
            email=None,
            address=None,
            tax_id=tax_id,
            created_at=datetime(2024, 1, 1),
        )

    def test_matches_name_company_and_tax_id(self):
        clients = [
            self._client(1, "Acme"),
            self._client(2, "Ravi", company="Deccan Movers"),
            self._client(3, "Meena", tax_id="29ABCDE1234F1Z5"),
        ]
        assert [c.id for c in ledger.filter_clients(clients, "acme")] == [1]
        assert [c.id for c in ledger.filter_clients(clients, "deccan")] == [2]
        assert [c.id for c in ledger.filter_clients(clients, "abcde")] == [3]
        assert len(ledger.filter_clients(clients, "")) == 3


class TestPastDue:
    """Tests for the display-only past-due check."""

    def test_unpaid_before_today_is_past_due(self, make_bill):
        assert ledger.is_past_due(make_bill(1, 10, "unpaid", date(2024, 3, 19)), REFERENCE)

    def test_same_day_is_not_past_due(self, make_bill):
        assert not ledger.is_past_due(make_bill(1, 10, "unpaid", REFERENCE), REFERENCE)

    def test_paid_is_never_past_due(self, make_bill):
        assert not ledger.is_past_due(make_bill(1, 10, "paid", date(2020, 1, 1)), REFERENCE)

    def test_status_is_not_changed(self, make_bill):
        bill = make_bill(1, 10, "unpaid", date(2024, 1, 1))
        ledger.is_past_due(bill, REFERENCE)
        assert bill.status == BillStatus.UNPAID


class TestGroupings:
    """Tests for recent bills and revenue groupings."""

    def test_recent_bills_newest_first(self, mixed_bills):
        assert [b.id for b in ledger.recent_bills(mixed_bills)] == [2, 1, 4, 3]

    def test_recent_bills_limit(self, mixed_bills):
        assert len(ledger.recent_bills(mixed_bills, limit=2)) == 2

    def test_revenue_by_client(self, mixed_bills):
        rows = ledger.revenue_by_client(mixed_bills)
        assert [(r.client_name, r.amount, r.bill_count) for r in rows] == [
            ("Acme", 580000, 2),
            ("Sharma Logistics", 250000, 1),
        ]

    def test_revenue_by_month_is_chronological(self, mixed_bills):
        assert ledger.revenue_by_month(mixed_bills) == {
            "2023-12": 80000,
            "2024-02": 250000,
            "2024-03": 500000,
        }


class TestSummaries:
    """Tests for assembled dashboard, report and payment figures."""

    def test_dashboard_summary(self, mixed_bills):
        summary = ledger.dashboard_summary(mixed_bills, client_count=2, reference=REFERENCE)
        assert summary.total_bills == 5
        assert summary.paid_bills == 3
        assert summary.unpaid_bills == 1
        assert summary.overdue_bills == 1
        assert summary.total_clients == 2
        assert summary.monthly_revenue == 500000
        assert summary.overdue_amount == 120000
        assert [b.id for b in summary.recent_bills] == [2, 1, 4, 3]

    def test_report_summary(self, mixed_bills):
        summary = ledger.report_summary(mixed_bills, REFERENCE)
        assert summary.reference == REFERENCE
        assert summary.monthly_revenue == 500000
        assert summary.yearly_revenue == 750000
        assert summary.total_bills == 5
        assert summary.paid_bills == 3
        assert summary.pending_bills == 2
        assert summary.average_bill_value == 250000
        assert summary.outstanding == 420000
        assert summary.overdue_amount == 120000

    def test_report_summary_empty(self):
        summary = ledger.report_summary([], REFERENCE)
        assert summary.total_bills == 0
        assert summary.average_bill_value == 0
        assert summary.revenue_by_client == ()
        assert summary.revenue_by_month == {}

    def test_payment_summary(self, mixed_bills, make_payment):
        payments = [make_payment(1, 500000, 1), make_payment(2, 250000, 4)]
        summary = ledger.payment_summary(mixed_bills, payments)
        assert summary.total_received == 750000
        assert summary.payment_count == 2
        assert summary.outstanding == 420000
        assert summary.outstanding_count == 2
        assert summary.overdue_amount == 120000
        assert summary.overdue_count == 1
