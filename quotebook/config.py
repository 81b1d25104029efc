"""
Configuration constants for the quotebook application.

Values that differ between deployments can be overridden through
environment variables (a ``.env`` file is loaded by the entry point).
"""

import os

# Storage keys, one JSON array per document type
INVOICES_STORAGE_KEY = "invoices"
QUOTATIONS_STORAGE_KEY = "quotations"
RECEIPTS_STORAGE_KEY = "receipts"

# Storage backend: "file", "memory" or "firestore"
DEFAULT_STORAGE_BACKEND = "file"
DEFAULT_DATA_DIR = ".quotebook"

# Firestore collection holding one document per storage key
KV_COLLECTION_NAME = "kv_store"
KV_VALUE_FIELD = "value"
DEFAULT_FIRESTORE_DATABASE_ID = "(default)"

# Collection prefix
PROD_COLLECTION_PREFIX = ""

# Document numbering, e.g. INV-2025-0042
INVOICE_NUMBER_PREFIX = "INV"
QUOTATION_NUMBER_PREFIX = "QUO"
RECEIPT_NUMBER_PREFIX = "REC"
DOCUMENT_NUMBER_SEQUENCE_LIMIT = 10000

# New invoices are due this many days after the issue date
DEFAULT_DUE_DAYS = 7

DATE_FORMAT = "%Y-%m-%d"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_storage_backend() -> str:
    return os.environ.get("QUOTEBOOK_STORAGE_BACKEND", DEFAULT_STORAGE_BACKEND).lower()


def get_data_dir() -> str:
    return os.environ.get("QUOTEBOOK_DATA_DIR", DEFAULT_DATA_DIR)


def get_collection_prefix() -> str:
    return os.environ.get("QUOTEBOOK_COLLECTION_PREFIX", PROD_COLLECTION_PREFIX)


def get_log_level() -> str:
    return os.environ.get("QUOTEBOOK_LOG_LEVEL", "INFO").upper()
