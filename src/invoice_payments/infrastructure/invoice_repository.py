from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from invoice_payments.application.ports import InvoiceRepository

if TYPE_CHECKING:
    from invoice_payments.domain.entities import Invoice
    from invoice_payments.domain.value_objects import InvoiceReference


class InMemoryInvoiceRepository(InvoiceRepository):
    """In-memory invoice repository for tests and single-process hosts.

    Implementation notes:
    - Uses dict with InvoiceReference as key (requires frozen dataclass)
    - Returns deep copies from load() to mimic database detachment
    - Stores deep copies in save() to prevent external mutation
    - NOT thread-safe; relies on external LockProvider for serialization

    Copy-on-read rationale:
    Returning copies catches bugs where code builds an updated invoice
    without calling save(). Decimal amounts and the payments tuple are
    deepcopy-safe.
    """

    def __init__(self, invoices: list[Invoice] | None = None) -> None:
        self._invoices: dict[InvoiceReference, Invoice] = {}
        for invoice in invoices or []:
            self.save(invoice)

    def load(self, reference: InvoiceReference) -> Invoice | None:
        invoice = self._invoices.get(reference)
        if invoice is None:
            return None
        return copy.deepcopy(invoice)

    def save(self, invoice: Invoice) -> None:
        self._invoices[invoice.reference] = copy.deepcopy(invoice)

    def __len__(self) -> int:
        return len(self._invoices)
