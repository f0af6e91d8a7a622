from __future__ import annotations

from dataclasses import dataclass

from invoice_payments.domain.exceptions import InvalidInvoiceReferenceError

MAX_LENGTH = 64


@dataclass(frozen=True)
class InvoiceReference:
    """Domain value object identifying an invoice.

    Rules:
      - Non-empty, max 64 chars
      - Whitespace is trimmed (normalization)
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidInvoiceReferenceError(
                f"Invoice reference must be a string, got {type(self.value).__name__}"
            )

        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidInvoiceReferenceError("Invoice reference cannot be empty")

        if len(normalized) > MAX_LENGTH:
            raise InvalidInvoiceReferenceError(
                f"Invoice reference cannot exceed {MAX_LENGTH} characters"
            )

    @classmethod
    def of(cls, reference: str | InvoiceReference) -> InvoiceReference:
        """Coerce a raw string or an existing reference into an InvoiceReference."""
        if isinstance(reference, InvoiceReference):
            return reference
        return cls(value=reference)

    def __str__(self) -> str:
        return self.value
