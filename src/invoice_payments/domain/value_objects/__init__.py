"""Value objects - Immutable objects defined by their attributes."""

from invoice_payments.domain.value_objects.invoice_reference import InvoiceReference
from invoice_payments.domain.value_objects.invoice_type import InvoiceType
from invoice_payments.domain.value_objects.money import ZERO, parse_amount
from invoice_payments.domain.value_objects.payment_outcome import OutcomeKind, PaymentOutcome
from invoice_payments.domain.value_objects.tax_policy import TaxPolicy

__all__ = [
    "ZERO",
    "InvoiceReference",
    "InvoiceType",
    "OutcomeKind",
    "PaymentOutcome",
    "TaxPolicy",
    "parse_amount",
]
