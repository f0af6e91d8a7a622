from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_payments.domain.entities import Invoice
    from invoice_payments.domain.value_objects import InvoiceReference


class InvoiceRepository(ABC):
    """Port for invoice persistence.

    Contract:
    - load() returns None if the invoice does not exist (no exception)
    - save() performs upsert: creates if new, updates if exists
    - save() fails loudly (raises) on I/O errors; the error propagates to the caller
    - InvoiceReference is immutable after entity creation
    - Implementations are NOT required to be thread-safe

    Serialization contract:
    For a given reference, save() must be linearizable with respect to
    concurrent load()/save() of the same reference. The processor achieves
    this by holding the reference's LockProvider lock around the whole
    load-validate-save sequence. A transactional implementation may instead
    provide it itself and be paired with NoOpLockProvider.
    """

    @abstractmethod
    def load(self, reference: InvoiceReference) -> Invoice | None:
        """Retrieve an invoice by reference.

        Args:
            reference: The invoice reference.

        Returns:
            The Invoice entity if found, None otherwise.
            Returned entity is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def save(self, invoice: Invoice) -> None:
        """Persist an invoice (upsert semantics).

        Args:
            invoice: The invoice entity to save.

        Creates the invoice if it doesn't exist, updates if it does.
        The invoice.reference must not change between creation and updates.
        """
