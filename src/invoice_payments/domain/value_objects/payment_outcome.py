"""Outcome classification returned by the payment processor.

Outcomes are normal business results, including the rejections. Only the
fatal conditions in domain.exceptions abort a call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    ALREADY_FULLY_PAID = "already_fully_paid"
    NO_PAYMENT_NEEDED = "no_payment_needed"
    INVALID_AMOUNT = "invalid_amount"
    FINAL_PARTIAL_PAYMENT_FULLY_PAID = "final_partial_payment_fully_paid"
    FULLY_PAID_NOW = "fully_paid_now"
    ANOTHER_PARTIAL_PAYMENT = "another_partial_payment"
    PARTIALLY_PAID_NOW = "partially_paid_now"


_MESSAGES = {
    OutcomeKind.ALREADY_FULLY_PAID: "invoice was already fully paid",
    OutcomeKind.NO_PAYMENT_NEEDED: "no payment needed",
    OutcomeKind.FINAL_PARTIAL_PAYMENT_FULLY_PAID: (
        "final partial payment received, invoice is now fully paid"
    ),
    OutcomeKind.FULLY_PAID_NOW: "invoice is now fully paid",
    OutcomeKind.ANOTHER_PARTIAL_PAYMENT: "another partial payment received, still not fully paid",
    OutcomeKind.PARTIALLY_PAID_NOW: "invoice is now partially paid",
}

_INVALID_AMOUNT_PARTIAL = "the payment is greater than the partial amount remaining"
_INVALID_AMOUNT_FIRST = "the payment is greater than the invoice amount"

APPLIED_KINDS = frozenset(
    {
        OutcomeKind.FINAL_PARTIAL_PAYMENT_FULLY_PAID,
        OutcomeKind.FULLY_PAID_NOW,
        OutcomeKind.ANOTHER_PARTIAL_PAYMENT,
        OutcomeKind.PARTIALLY_PAID_NOW,
    }
)


@dataclass(frozen=True, slots=True)
class PaymentOutcome:
    """Tagged result of processing a payment.

    ``has_existing_payments`` only changes the message of INVALID_AMOUNT:
    a later payment exceeds the remaining balance, a first payment exceeds
    the full invoice amount.
    """

    kind: OutcomeKind
    has_existing_payments: bool = False

    @property
    def message(self) -> str:
        if self.kind == OutcomeKind.INVALID_AMOUNT:
            return _INVALID_AMOUNT_PARTIAL if self.has_existing_payments else _INVALID_AMOUNT_FIRST
        return _MESSAGES[self.kind]

    @property
    def is_applied(self) -> bool:
        """True if the payment was recorded against the invoice."""
        return self.kind in APPLIED_KINDS

    def __str__(self) -> str:
        return self.message
