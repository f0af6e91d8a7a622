"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory invoice repository
- Locking: Per-invoice serialization for single-process hosts
- Logging: Handler and formatter setup for the package logger

Infrastructure adapters implement the ports defined in the application layer.
"""

from invoice_payments.infrastructure.invoice_repository import InMemoryInvoiceRepository
from invoice_payments.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from invoice_payments.infrastructure.logging_config import configure_logging, reset_logging

__all__ = [
    "InMemoryInvoiceRepository",
    "InMemoryLockProvider",
    "NoOpLockProvider",
    "configure_logging",
    "reset_logging",
]
