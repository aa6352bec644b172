"""Shared pytest fixtures for billit tests."""

import tempfile
import os
from datetime import date
import pytest

from billit.database.factories import create_sqlite_database
from billit.domain.bill import BillService
from billit.domain.client import ClientService
from billit.domain.entities import Bill, BillStatus, Payment, Service
from billit.domain.payment import PaymentService
from billit.domain.report import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def bill_service(temp_db):
    """Create a BillService with a temporary database."""
    return BillService(temp_db)


@pytest.fixture
def payment_service(temp_db):
    """Create a PaymentService with a temporary database."""
    return PaymentService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def sample_client(client_service):
    """Create a sample client for testing."""
    client_id = client_service.create_client(
        name="Acme", company="Acme Transport Pvt Ltd", tax_id="27AAACA1234A1Z5"
    )
    return client_service.get_client(client_id)


@pytest.fixture
def sample_bill(bill_service, sample_client):
    """Create an unpaid bill of 3000 rupees for the sample client."""
    bill_id = bill_service.create_bill(
        client_id=sample_client.id,
        date=date(2024, 3, 10),
        services=[Service("MH12AB1234", "Pune", "Mumbai", 300000)],
    )
    return bill_service.get_bill(bill_id)


@pytest.fixture
def make_bill():
    """Build in-memory Bill entities for ledger tests."""

    def _make(
        id: int,
        amount: int,
        status: BillStatus | str = BillStatus.UNPAID,
        bill_date: date = date(2024, 3, 15),
        client_name: str = "Acme",
    ) -> Bill:
        return Bill(
            id=id,
            client_id=1,
            client_name=client_name,
            date=bill_date,
            status=BillStatus(status),
            amount=amount,
            services=(Service("MH12AB1234", "Pune", "Mumbai", amount),),
        )

    return _make


@pytest.fixture
def make_payment():
    """Build in-memory Payment entities for ledger tests."""

    def _make(id: int, amount: int, bill_id: int = 1) -> Payment:
        return Payment(
            id=id,
            bill_id=bill_id,
            amount=amount,
            payment_date=date(2024, 3, 20),
            payment_mode=None,
            transaction_reference=None,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
