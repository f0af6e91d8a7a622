"""Domain exceptions for invoice-payments.

Exception hierarchy:
    DomainException (base)
    ├── Not Found Errors
    │   └── NoMatchingInvoiceError (fatal)
    ├── Invariant Errors
    │   ├── InvalidInvoiceStateError (fatal)
    │   └── PaymentReferenceMismatchError
    └── Validation Errors
        ├── InvalidInvoiceReferenceError
        ├── InvalidAmountError
        └── InvalidTaxPolicyError

Business rejections (already paid, no payment needed, amount too large) are
NOT exceptions. They are returned as PaymentOutcome values.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Fatal conditions that abort a payment before any decision is made."""

    NO_MATCHING_INVOICE = "no_matching_invoice"
    INVALID_INVOICE_STATE = "invalid_invoice_state"


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


class FatalPaymentError(DomainException):
    """Base for errors that make a payment call unrecoverable.

    These are never retried by the processor. ``kind`` identifies the
    condition when the error is carried inside a tagged result instead
    of being raised.
    """

    kind: ErrorKind


# =============================================================================
# Not Found Errors
# =============================================================================


class NoMatchingInvoiceError(FatalPaymentError):
    """Raised when no invoice exists for the payment's reference."""

    kind = ErrorKind.NO_MATCHING_INVOICE
    default_message = "There is no invoice matching this payment"

    def __init__(self, message: str = default_message) -> None:
        super().__init__(message)


# =============================================================================
# Invariant Errors
# =============================================================================


class InvalidInvoiceStateError(FatalPaymentError):
    """Raised when a persisted invoice has amount 0 and recorded payments.

    The processor never produces this state; it indicates corrupted data
    upstream and cannot be repaired here.
    """

    kind = ErrorKind.INVALID_INVOICE_STATE
    default_message = (
        "The invoice is in an invalid state, it has an amount of 0 and it has payments."
    )

    def __init__(self, message: str = default_message) -> None:
        super().__init__(message)


class PaymentReferenceMismatchError(DomainException):
    """Raised when a payment is applied to an invoice it does not reference."""


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidInvoiceReferenceError(DomainException):
    """Raised when an invoice reference fails validation.

    A reference must be non-empty after trimming and at most 64 chars.
    """


class InvalidAmountError(DomainException):
    """Raised when a monetary amount fails validation.

    Payment amounts must be finite and greater than 0.
    Invoice amounts must be finite and not negative.
    Floats are rejected to keep decimal arithmetic exact.
    """


class InvalidTaxPolicyError(DomainException):
    """Raised when a tax policy is configured with a negative rate or precision."""
