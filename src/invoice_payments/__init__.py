"""Record payments against invoices and classify the invoice's resulting state."""

from invoice_payments.application.use_cases.process_payment import (
    Fatal,
    Outcome,
    PaymentProcessor,
    ProcessPaymentResponse,
    ProcessResult,
)
from invoice_payments.bootstrap import create_payment_processor
from invoice_payments.domain.entities import Invoice, InvoiceType, Payment
from invoice_payments.domain.value_objects import (
    InvoiceReference,
    OutcomeKind,
    PaymentOutcome,
    TaxPolicy,
)

__all__ = [
    "Fatal",
    "Invoice",
    "InvoiceReference",
    "InvoiceType",
    "Outcome",
    "OutcomeKind",
    "Payment",
    "PaymentOutcome",
    "PaymentProcessor",
    "ProcessPaymentResponse",
    "ProcessResult",
    "TaxPolicy",
    "create_payment_processor",
]
