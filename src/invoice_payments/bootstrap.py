"""Wiring helpers for hosts embedding the payment processor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoice_payments.application.use_cases.process_payment import PaymentProcessor
from invoice_payments.config import Settings, get_settings
from invoice_payments.domain.value_objects import TaxPolicy
from invoice_payments.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from invoice_payments.infrastructure.logging_config import configure_logging

if TYPE_CHECKING:
    from invoice_payments.application.ports import InvoiceRepository, LockProvider


def tax_policy_from_settings(settings: Settings) -> TaxPolicy:
    return TaxPolicy(rate=settings.commercial_tax_rate, decimal_places=settings.tax_decimal_places)


def create_payment_processor(
    invoice_repository: InvoiceRepository,
    lock_provider: LockProvider | None = None,
    settings: Settings | None = None,
    setup_logging: bool = False,
) -> PaymentProcessor:
    """Build a PaymentProcessor from settings.

    Args:
        invoice_repository: Where invoices are loaded from and saved to.
        lock_provider: Per-invoice serialization. When omitted,
            settings.serialize_per_invoice picks InMemoryLockProvider or
            NoOpLockProvider.
        settings: Defaults to get_settings().
        setup_logging: Also call configure_logging() with the configured
            level and format.
    """
    settings = settings or get_settings()

    if setup_logging:
        configure_logging(level=settings.log_level, fmt=settings.log_format)

    if lock_provider is None:
        lock_provider = InMemoryLockProvider() if settings.serialize_per_invoice else NoOpLockProvider()

    return PaymentProcessor(
        invoice_repository=invoice_repository,
        lock_provider=lock_provider,
        tax_policy=tax_policy_from_settings(settings),
    )
