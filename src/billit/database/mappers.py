"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the ORM schema can change
without touching the ledger calculations.
"""

from billit.domain import entities as domain
from billit.database.models import (
    Client as ORMClient,
    Bill as ORMBill,
    BillService as ORMBillService,
    Payment as ORMPayment,
)


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        company=orm_client.company,
        contact=orm_client.contact,
        email=orm_client.email,
        address=orm_client.address,
        tax_id=orm_client.tax_id,
        created_at=orm_client.created_at,
    )


def service_to_domain(orm_service: ORMBillService) -> domain.Service:
    """Convert SQLAlchemy BillService model to domain Service entity."""
    return domain.Service(
        vehicle=orm_service.vehicle,
        origin=orm_service.origin,
        destination=orm_service.destination,
        amount=orm_service.amount,
    )


def service_to_orm(service: domain.Service, position: int) -> ORMBillService:
    """Build a SQLAlchemy BillService row for a domain Service."""
    return ORMBillService(
        position=position,
        vehicle=service.vehicle,
        origin=service.origin,
        destination=service.destination,
        amount=service.amount,
    )


def bill_to_domain(orm_bill: ORMBill) -> domain.Bill:
    """Convert SQLAlchemy Bill model to domain Bill entity."""
    return domain.Bill(
        id=orm_bill.id,
        client_id=orm_bill.client_id,
        client_name=orm_bill.client_name,
        date=orm_bill.date,
        status=domain.BillStatus(orm_bill.status),
        amount=orm_bill.amount,
        services=tuple(service_to_domain(s) for s in orm_bill.services),
        created_at=orm_bill.created_at,
    )


def payment_to_domain(orm_payment: ORMPayment) -> domain.Payment:
    """Convert SQLAlchemy Payment model to domain Payment entity."""
    return domain.Payment(
        id=orm_payment.id,
        bill_id=orm_payment.bill_id,
        amount=orm_payment.amount,
        payment_date=orm_payment.payment_date,
        payment_mode=orm_payment.payment_mode,
        transaction_reference=orm_payment.transaction_reference,
        created_at=orm_payment.created_at,
    )
