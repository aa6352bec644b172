"""Domain model entities for billit.

These are pure data classes representing business concepts, independent of
database schema. Monetary amounts are integer paise throughout so that
summing many line items never drifts.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from enum import Enum
from typing import Optional


class BillStatus(str, Enum):
    """Stored payment status of a bill."""

    UNPAID = "unpaid"
    PAID = "paid"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class Client:
    """Client domain entity."""

    id: int
    name: str
    company: Optional[str]
    contact: Optional[str]
    email: Optional[str]
    address: Optional[str]
    tax_id: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Service:
    """Line item of a bill: one vehicle run on a route."""

    vehicle: str
    origin: str
    destination: str
    amount: int


@dataclass(frozen=True)
class Bill:
    """Bill domain entity.

    ``client_name`` is the client's display name as it was when the bill was
    last saved. ``amount`` is the sum of the service amounts at that time.
    """

    id: int
    client_id: int
    client_name: str
    date: date
    status: BillStatus
    amount: int
    services: tuple[Service, ...] = ()
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Payment:
    """Payment received against a single bill."""

    id: int
    bill_id: int
    amount: int
    payment_date: date
    payment_mode: Optional[str]
    transaction_reference: Optional[str]
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ClientRevenue:
    """Paid revenue attributed to one client display name."""

    client_name: str
    amount: int
    bill_count: int


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the dashboard."""

    total_bills: int
    paid_bills: int
    unpaid_bills: int
    overdue_bills: int
    total_clients: int
    monthly_revenue: int
    overdue_amount: int
    recent_bills: tuple[Bill, ...] = ()


@dataclass(frozen=True)
class ReportSummary:
    """Figures shown on the reports screen."""

    reference: date
    monthly_revenue: int
    yearly_revenue: int
    total_bills: int
    paid_bills: int
    pending_bills: int
    average_bill_value: int
    outstanding: int
    overdue_amount: int
    revenue_by_client: tuple[ClientRevenue, ...] = ()
    revenue_by_month: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PaymentSummary:
    """Figures shown above the payments table."""

    total_received: int
    payment_count: int
    outstanding: int
    outstanding_count: int
    overdue_amount: int
    overdue_count: int
