"""Data models for the document collections."""

from quotebook.models.schemas import (
    InvoiceStatus, QuotationStatus, PaymentMethod,
    LineItem, DocumentTotals, BaseDocument,
    Invoice, Quotation, Receipt,
)

__all__ = [
    "InvoiceStatus",
    "QuotationStatus",
    "PaymentMethod",
    "LineItem",
    "DocumentTotals",
    "BaseDocument",
    "Invoice",
    "Quotation",
    "Receipt",
]
