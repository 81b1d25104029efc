"""
Shared fixtures for the quotebook tests
"""

import itertools

import pytest

from quotebook.mocks import InMemoryKeyValueStore
from quotebook.models.schemas import Invoice, LineItem, InvoiceStatus
from quotebook.repositories import InvoiceRepository, QuotationRepository, ReceiptRepository

FIXED_DATE = "2025-07-10"


@pytest.fixture
def kv_store():
    """An empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def id_factory():
    """Predictable ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def invoice_repo(kv_store, id_factory):
    return InvoiceRepository(kv_store, id_factory=id_factory, clock=lambda: FIXED_DATE)


@pytest.fixture
def quotation_repo(kv_store, id_factory):
    return QuotationRepository(kv_store, id_factory=id_factory, clock=lambda: FIXED_DATE)


@pytest.fixture
def receipt_repo(kv_store, id_factory):
    return ReceiptRepository(kv_store, id_factory=id_factory, clock=lambda: FIXED_DATE)


@pytest.fixture
def widget_invoice():
    """Invoice for two widgets at 9.995 with 8% tax."""
    return Invoice(
        customer_name="MegaCorp Solutions",
        invoice_number="INV-2025-0001",
        issue_date="2025-07-01",
        due_date="2025-07-08",
        items=[LineItem(description="Widget", quantity=2, unit_price=9.995)],
        tax_rate=0.08,
        status=InvoiceStatus.SENT,
    )
