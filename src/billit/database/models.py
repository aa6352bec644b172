"""SQLAlchemy models for billit database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    company = Column(String, nullable=True)
    contact = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    tax_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Bills keep their client_id after the client is deleted
    bills = relationship("Bill", back_populates="client", passive_deletes="all")


class Bill(Base):
    """Bill model. Amounts are stored in paise."""

    __tablename__ = "bills"

    id = Column(Integer, primary_key=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    client_name = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default="unpaid")
    amount = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    client = relationship("Client", back_populates="bills")
    services = relationship(
        "BillService",
        back_populates="bill",
        cascade="all, delete-orphan",
        order_by="BillService.position",
    )
    payments = relationship("Payment", back_populates="bill")


class BillService(Base):
    """Service line item of a bill."""

    __tablename__ = "bill_services"

    id = Column(Integer, primary_key=True)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=False)
    position = Column(Integer, nullable=False)
    vehicle = Column(String, nullable=False)
    origin = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)

    # Relationships
    bill = relationship("Bill", back_populates="services")


class Payment(Base):
    """Payment model."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    payment_date = Column(Date, nullable=False)
    payment_mode = Column(String, nullable=True)
    transaction_reference = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    bill = relationship("Bill", back_populates="payments")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
