"""Domain entities - Objects with identity and lifecycle."""

from invoice_payments.domain.entities.invoice import Invoice
from invoice_payments.domain.entities.payment import Payment
from invoice_payments.domain.value_objects import InvoiceType

__all__ = [
    "Invoice",
    "InvoiceType",
    "Payment",
]
