"""Shared pytest fixtures for the test suite."""

from decimal import Decimal

import pytest

from invoice_payments.application.use_cases.process_payment import PaymentProcessor
from invoice_payments.domain.entities import Invoice, InvoiceType
from invoice_payments.domain.value_objects import InvoiceReference, TaxPolicy
from invoice_payments.infrastructure.invoice_repository import InMemoryInvoiceRepository
from invoice_payments.infrastructure.lock_provider import NoOpLockProvider


@pytest.fixture
def reference() -> InvoiceReference:
    return InvoiceReference("INV-0001")


@pytest.fixture
def tax_policy() -> TaxPolicy:
    return TaxPolicy()


@pytest.fixture
def standard_invoice(reference: InvoiceReference) -> Invoice:
    """An unpaid standard invoice for 100."""
    return Invoice(reference=reference, amount=Decimal("100"), type=InvoiceType.STANDARD)


@pytest.fixture
def commercial_invoice(reference: InvoiceReference) -> Invoice:
    """An unpaid commercial invoice for 100."""
    return Invoice(reference=reference, amount=Decimal("100"), type=InvoiceType.COMMERCIAL)


@pytest.fixture
def invoice_repository() -> InMemoryInvoiceRepository:
    return InMemoryInvoiceRepository()


@pytest.fixture
def processor(
    invoice_repository: InMemoryInvoiceRepository, tax_policy: TaxPolicy
) -> PaymentProcessor:
    """Processor with NoOpLockProvider for single-threaded unit tests."""
    return PaymentProcessor(
        invoice_repository=invoice_repository,
        lock_provider=NoOpLockProvider(),
        tax_policy=tax_policy,
    )
