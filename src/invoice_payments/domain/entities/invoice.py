"""Invoice entity with payment-application behavior."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from invoice_payments.domain.exceptions import InvalidAmountError, PaymentReferenceMismatchError
from invoice_payments.domain.value_objects import (
    ZERO,
    InvoiceReference,
    InvoiceType,
    parse_amount,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from invoice_payments.domain.entities.payment import Payment
    from invoice_payments.domain.value_objects import TaxPolicy


@dataclass(frozen=True, slots=True)
class Invoice:
    """Invoice entity tracking what is owed and what has been paid.

    Invoice is immutable (frozen dataclass). apply_payment() returns a new
    Invoice instance; the caller persists it.

    ``amount_paid`` is a running total kept alongside ``payments``. The two
    are read separately: the remaining balance comes from ``amount_paid``,
    while "already paid" and "has existing payments" come from the payment
    list.

    Invariant: an invoice with ``amount == 0`` has no payments. Construction
    does not enforce it so that corrupted persisted data can be loaded and
    rejected by the processor (see is_in_valid_state).
    """

    reference: InvoiceReference
    amount: Decimal
    type: InvoiceType = InvoiceType.STANDARD
    amount_paid: Decimal = ZERO
    tax_amount: Decimal = ZERO
    payments: tuple[Payment, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        reference: str | InvoiceReference,
        amount: Decimal | int | str,
        type: InvoiceType = InvoiceType.STANDARD,  # noqa: A002
    ) -> Invoice:
        """Factory method to create an unpaid Invoice with validation.

        Raises:
            InvalidInvoiceReferenceError: If the reference is empty or too long.
            InvalidAmountError: If the amount is negative or not a finite number.
        """
        parsed = parse_amount(amount)
        if parsed < ZERO:
            raise InvalidAmountError(f"Invoice amount cannot be negative, got {parsed}")

        return cls(reference=InvoiceReference.of(reference), amount=parsed, type=type)

    @property
    def remaining_amount(self) -> Decimal:
        return self.amount - self.amount_paid

    @property
    def payments_total(self) -> Decimal:
        return sum((p.amount for p in self.payments), ZERO)

    @property
    def has_existing_payments(self) -> bool:
        """True if at least one payment exists and the payments do not sum to 0."""
        return bool(self.payments) and self.payments_total != ZERO

    @property
    def is_fully_paid(self) -> bool:
        total = self.payments_total
        return self.has_existing_payments and total != ZERO and self.amount == total

    @property
    def is_in_valid_state(self) -> bool:
        return not (self.amount == ZERO and self.payments)

    @property
    def payment_ceiling(self) -> Decimal:
        """Largest payment currently admissible.

        The remaining balance once payments exist, the full amount for a
        first payment.
        """
        if self.has_existing_payments:
            return self.remaining_amount
        return self.amount

    def accepts(self, amount: Decimal) -> bool:
        return amount <= self.payment_ceiling

    def apply_payment(self, payment: Payment, tax_policy: TaxPolicy) -> Invoice:
        """Record a payment against this invoice.

        Args:
            payment: The payment to record.
            tax_policy: Policy deciding the tax accrued by this payment.

        Returns:
            New Invoice with amount_paid, tax_amount and payments updated.

        Raises:
            PaymentReferenceMismatchError: If the payment references another invoice.

        Note:
            This method does NOT check accepts(). The processor is
            responsible for rejecting payments above the ceiling before
            calling this method.
        """
        if payment.reference != self.reference:
            raise PaymentReferenceMismatchError(
                f"Payment for invoice {payment.reference} cannot be applied to "
                f"invoice {self.reference}"
            )

        return replace(
            self,
            amount_paid=self.amount_paid + payment.amount,
            tax_amount=self.tax_amount + tax_policy.tax_for(self.type, payment.amount),
            payments=(*self.payments, payment),
        )
