"""Repository package for document storage."""

from quotebook.repositories.kv_store import (
    KeyValueStore, FileKeyValueStore, FirestoreKeyValueStore, create_kv_store
)
from quotebook.repositories.record_store import RecordStore
from quotebook.repositories.invoice_repository import InvoiceRepository
from quotebook.repositories.quotation_repository import QuotationRepository
from quotebook.repositories.receipt_repository import ReceiptRepository

__all__ = [
    "KeyValueStore",
    "FileKeyValueStore",
    "FirestoreKeyValueStore",
    "create_kv_store",
    "RecordStore",
    "InvoiceRepository",
    "QuotationRepository",
    "ReceiptRepository"
]
