from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port serializing payments to the same invoice.

    The payment processor holds ``acquire(str(invoice_reference))`` around
    the whole load-validate-apply-save sequence of one call. While it is held,
    no other call can load or save that invoice, so each payment's
    read-modify-write of ``amount_paid`` and ``payments`` is linearizable
    with respect to every other payment on the same reference.

    Contract:
    - acquire() MUST serialize every holder of the same invoice reference
    - acquire() MUST release on context exit, including when the call raises
      (a NoMatchingInvoiceError or a repository save failure frees the invoice)
    - acquire() MUST block until the reference is free; there is no timeout
    - Payments to different invoice references MAY proceed concurrently

    A repository that serializes each reference itself (row locks inside a
    transaction) can be paired with a provider that does nothing.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Hold the lock for one invoice reference.

        Args:
            resource_id: The invoice reference as a string, after the
                normalization InvoiceReference applies.

        Yields:
            None. The invoice is locked for the duration of the context.
        """
        ...
