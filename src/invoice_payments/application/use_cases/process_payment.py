from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from invoice_payments.domain.exceptions import (
    ErrorKind,
    FatalPaymentError,
    InvalidInvoiceStateError,
    NoMatchingInvoiceError,
)
from invoice_payments.domain.value_objects import OutcomeKind, PaymentOutcome, TaxPolicy

if TYPE_CHECKING:
    from invoice_payments.application.ports import InvoiceRepository, LockProvider
    from invoice_payments.domain.entities import Invoice, Payment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessPaymentResponse:
    """Output DTO for the process payment use case."""

    outcome: PaymentOutcome
    invoice: Invoice  # Saved invoice when applied, loaded invoice otherwise

    @property
    def message(self) -> str:
        return self.outcome.message


@dataclass(frozen=True, slots=True)
class Fatal:
    """The call failed before anything was written."""

    error: FatalPaymentError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True, slots=True)
class Outcome:
    """The call completed; the outcome may still be a business rejection."""

    response: ProcessPaymentResponse


ProcessResult = Fatal | Outcome


class PaymentProcessor:
    """Orchestrates recording a payment against an invoice.

    Responsibilities:
    - Hold the per-invoice lock for the whole call
    - Load the invoice and reject missing or corrupted ones (fatal)
    - Short-circuit invoices that need no payment
    - Reject payments above the admissible ceiling
    - Apply the payment, persist, and classify the result

    Every rejection path is a pure read. The invoice is only saved after a
    payment has been applied.
    """

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        lock_provider: LockProvider,
        tax_policy: TaxPolicy | None = None,
    ) -> None:
        self._invoice_repo = invoice_repository
        self._lock_provider = lock_provider
        self._tax_policy = tax_policy or TaxPolicy()

    def process(self, payment: Payment) -> ProcessPaymentResponse:
        """Record a payment and classify the invoice's resulting state.

        Args:
            payment: The payment to record.

        Returns:
            ProcessPaymentResponse with the outcome and the resulting invoice.

        Raises:
            NoMatchingInvoiceError: No invoice exists for payment.reference.
            InvalidInvoiceStateError: The stored invoice has amount 0 and payments.
        """
        with self._lock_provider.acquire(str(payment.reference)):
            return self._process_within_lock(payment)

    def evaluate(self, payment: Payment) -> ProcessResult:
        """Same as process(), but fatal conditions are returned as Fatal.

        Repository errors are not fatal payment conditions and still propagate.
        """
        try:
            return Outcome(self.process(payment))
        except FatalPaymentError as e:
            return Fatal(e)

    def _process_within_lock(self, payment: Payment) -> ProcessPaymentResponse:
        """Run the decision pipeline inside the lock's critical section."""

        # Step 1: Load and validate
        invoice = self._load_valid_invoice(payment)

        # Step 2: Nothing left to pay
        if invoice.is_fully_paid:
            return self._reject(invoice, PaymentOutcome(OutcomeKind.ALREADY_FULLY_PAID))

        # Step 3: Nothing to pay at all
        if invoice.amount == 0:
            return self._reject(invoice, PaymentOutcome(OutcomeKind.NO_PAYMENT_NEEDED))

        # Step 4: Amount must fit under the ceiling
        had_existing_payments = invoice.has_existing_payments
        if not invoice.accepts(payment.amount):
            return self._reject(
                invoice,
                PaymentOutcome(
                    OutcomeKind.INVALID_AMOUNT, has_existing_payments=had_existing_payments
                ),
            )

        # Step 5-6: Apply and persist
        updated = invoice.apply_payment(payment, self._tax_policy)
        self._invoice_repo.save(updated)

        # Step 7: Classify
        outcome = PaymentOutcome(self._classify(updated, payment, had_existing_payments))
        logger.info(
            "Payment of %s applied to invoice %s: %s (paid %s of %s, tax %s)",
            payment.amount,
            updated.reference,
            outcome.kind.value,
            updated.amount_paid,
            updated.amount,
            updated.tax_amount,
            extra={"invoice_reference": str(updated.reference), "outcome": outcome.kind.value},
        )
        return ProcessPaymentResponse(outcome=outcome, invoice=updated)

    def _load_valid_invoice(self, payment: Payment) -> Invoice:
        invoice = self._invoice_repo.load(payment.reference)
        if invoice is None:
            logger.warning("No invoice matches payment reference %s", payment.reference)
            raise NoMatchingInvoiceError()

        logger.debug(
            "Loaded invoice %s: amount=%s paid=%s payments=%d",
            invoice.reference,
            invoice.amount,
            invoice.amount_paid,
            len(invoice.payments),
        )

        if not invoice.is_in_valid_state:
            logger.warning(
                "Invoice %s has amount 0 but %d payments recorded",
                invoice.reference,
                len(invoice.payments),
            )
            raise InvalidInvoiceStateError()

        return invoice

    def _reject(self, invoice: Invoice, outcome: PaymentOutcome) -> ProcessPaymentResponse:
        logger.info("Payment to invoice %s not applied: %s", invoice.reference, outcome.message)
        return ProcessPaymentResponse(outcome=outcome, invoice=invoice)

    @staticmethod
    def _classify(updated: Invoice, payment: Payment, had_existing_payments: bool) -> OutcomeKind:
        """Pick the outcome after a payment has been applied.

        ``had_existing_payments`` is taken before the payment was applied while
        ``amount_paid`` is taken after. A payment only counts as a follow-up
        when earlier payments existed and it is not the whole amount paid so far.
        """
        is_follow_up = had_existing_payments and updated.amount_paid != payment.amount

        if updated.remaining_amount == 0:
            if is_follow_up:
                return OutcomeKind.FINAL_PARTIAL_PAYMENT_FULLY_PAID
            return OutcomeKind.FULLY_PAID_NOW

        if is_follow_up:
            return OutcomeKind.ANOTHER_PARTIAL_PAYMENT
        return OutcomeKind.PARTIALLY_PAID_NOW
