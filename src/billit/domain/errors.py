"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as paying a bill twice."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def client_not_found(client_id: int) -> str:
    """Return message for missing client by ID."""
    return f"Client {client_id} not found"


def client_name_not_found(name: str) -> str:
    """Return message for missing client by name."""
    return f"Client '{name}' not found"


def bill_not_found(bill_id: int) -> str:
    """Return message for missing bill."""
    return f"Bill {bill_id} not found"


def bill_already_paid(bill_id: int) -> str:
    """Return message when a payment is recorded twice."""
    return f"Bill {bill_id} is already paid"


def invalid_status(status: str) -> str:
    """Return message for an unknown bill status."""
    return f"Invalid status '{status}'. Expected one of: unpaid, paid, overdue"


def bill_delete_blocked(bill_id: int, payment_count: int) -> str:
    """Return message when a bill has recorded payments."""
    return (
        f"Cannot delete bill {bill_id}: it has {payment_count} "
        f"payment{'s' if payment_count != 1 else ''} recorded."
    )
