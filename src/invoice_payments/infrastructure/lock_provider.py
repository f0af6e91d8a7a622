from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import TYPE_CHECKING

from invoice_payments.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class _ResourceLock:
    lock: Lock = field(default_factory=Lock)
    users: int = 0  # Holders plus waiters


class InMemoryLockProvider(LockProvider):
    """In-memory lock provider using per-resource locks.

    Implementation uses two-phase locking:
    1. Global lock protects the lock dictionary during lookup/creation
    2. Resource lock serializes access to the specific resource

    Each resource lock counts the threads holding or waiting for it and is
    dropped from the dictionary when the last one leaves, so the dictionary
    only grows with the number of invoices being paid concurrently.

    Limitations:
    - Single-process only (locks don't work across processes)
    - Not suitable for production with multiple instances
    """

    def __init__(self) -> None:
        self._locks: dict[str, _ResourceLock] = {}
        self._global_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        # Phase 1: Get or create the resource lock and register as a user
        with self._global_lock:
            entry = self._locks.get(resource_id)
            if entry is None:
                entry = self._locks[resource_id] = _ResourceLock()
            entry.users += 1

        # Phase 2: Hold the resource lock for the critical section
        try:
            with entry.lock:
                yield
        finally:
            with self._global_lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[resource_id]

    @property
    def active_resources(self) -> int:
        """Number of resources currently held or waited on."""
        with self._global_lock:
            return len(self._locks)


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    Use this for unit tests where:
    - Concurrency is not being tested
    - Tests are single-threaded

    Or with an InvoiceRepository that serializes each reference itself
    (e.g., row locks inside a database transaction).
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
