from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from invoice_payments.domain.exceptions import InvalidAmountError
from invoice_payments.domain.value_objects import ZERO, InvoiceReference, parse_amount

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment submitted against exactly one invoice.

    Payments are immutable once submitted. Accepted payments are appended
    to the invoice's payment list and never edited or removed.

    Use the create() factory method to construct instances with validation.
    """

    reference: InvoiceReference
    amount: Decimal

    def __post_init__(self) -> None:
        # Keeps repository lookups keyed by InvoiceReference when create() is bypassed
        if not isinstance(self.reference, InvoiceReference):
            object.__setattr__(self, "reference", InvoiceReference.of(self.reference))

    @classmethod
    def create(
        cls,
        reference: str | InvoiceReference,
        amount: Decimal | int | str,
    ) -> Payment:
        """Factory method to create a Payment with validation.

        Args:
            reference: Reference of the invoice being paid.
            amount: Amount paid. Must be greater than 0.

        Returns:
            A new Payment instance.

        Raises:
            InvalidInvoiceReferenceError: If the reference is empty or too long.
            InvalidAmountError: If the amount is not a finite number greater than 0.
        """
        parsed = parse_amount(amount)
        if parsed <= ZERO:
            raise InvalidAmountError(f"Payment amount must be greater than 0, got {parsed}")

        return cls(reference=InvoiceReference.of(reference), amount=parsed)
