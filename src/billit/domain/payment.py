"""Payment domain service."""

import logging
from datetime import date
from typing import Optional

from billit.database.base import Database
from billit.domain.entities import BillStatus, Payment as PaymentEntity
from billit.domain.errors import ConflictError, NotFoundError, bill_already_paid, bill_not_found

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for recording payments against bills."""

    def __init__(self, db: Database):
        """Initialize payment service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_payment(
        self,
        bill_id: int,
        payment_date: date,
        payment_mode: Optional[str] = None,
        transaction_reference: Optional[str] = None,
    ) -> int:
        """Record full payment of a bill and mark it paid.

        The payment amount is the bill amount. The payment row and the status
        change are written in one transaction, so either both happen or
        neither does.

        Args:
            bill_id: Bill being paid
            payment_date: Date the money was received
            payment_mode: Optional mode (cash, UPI, cheque, ...)
            transaction_reference: Optional bank or UPI reference

        Returns:
            Payment ID

        Raises:
            NotFoundError: If the bill doesn't exist
            ConflictError: If the bill is already paid
        """
        bill = self.db.get_bill(bill_id)
        if bill is None:
            raise NotFoundError(bill_not_found(bill_id))
        if bill.status == BillStatus.PAID:
            logger.warning("Refused second payment for bill %s", bill_id)
            raise ConflictError(bill_already_paid(bill_id))

        payment_id = self.db.record_payment(
            bill_id=bill_id,
            amount=bill.amount,
            payment_date=payment_date,
            payment_mode=(payment_mode or "").strip() or None,
            transaction_reference=(transaction_reference or "").strip() or None,
        )
        logger.info(
            "Recorded payment %s of %d paise for bill %s", payment_id, bill.amount, bill_id
        )
        return payment_id

    def list_payments(self, bill_id: Optional[int] = None) -> list[PaymentEntity]:
        """List payments newest first, optionally for one bill."""
        return self.db.list_payments(bill_id=bill_id)
