"""Starting values for new document forms."""

import random
from typing import Any, Dict, Optional

from quotebook.config import (
    INVOICE_NUMBER_PREFIX, QUOTATION_NUMBER_PREFIX, RECEIPT_NUMBER_PREFIX,
    DOCUMENT_NUMBER_SEQUENCE_LIMIT, DEFAULT_DUE_DAYS
)
from quotebook.models.schemas import InvoiceStatus, QuotationStatus, PaymentMethod
from quotebook.utils.parsing import today_iso, add_days


def generate_document_number(prefix: str, today: Optional[str] = None,
                             rng: Optional[random.Random] = None) -> str:
    """
    Build a document number like INV-2025-0042.

    The trailing part is random, not a sequence, so two numbers can collide;
    document numbers are not used as keys.

    Args:
        prefix: Document prefix (INV, QUO, REC)
        today: Date the year is taken from, YYYY-MM-DD (defaults to today)
        rng: Optional random source (for tests)
    """
    year = (today or today_iso())[:4]
    sequence = (rng or random).randrange(DOCUMENT_NUMBER_SEQUENCE_LIMIT)
    return f"{prefix}-{year}-{sequence:04d}"


def default_due_date(issue_date: str, days: int = DEFAULT_DUE_DAYS) -> str:
    return add_days(issue_date, days)


def _blank_item() -> Dict[str, Any]:
    return {"description": "", "quantity": 1, "unitPrice": 0.01}


def new_invoice_defaults(today: Optional[str] = None) -> Dict[str, Any]:
    """Form values for a new invoice: issued today, due in a week, one blank item."""
    today = today or today_iso()
    return {
        "customerName": "",
        "customerEmail": "",
        "invoiceNumber": generate_document_number(INVOICE_NUMBER_PREFIX, today),
        "issueDate": today,
        "dueDate": default_due_date(today),
        "items": [_blank_item()],
        "taxRate": 0.0,
        "status": InvoiceStatus.DRAFT.value,
        "notes": "",
    }


def new_quotation_defaults(today: Optional[str] = None) -> Dict[str, Any]:
    today = today or today_iso()
    return {
        "customerName": "",
        "customerEmail": "",
        "quotationNumber": generate_document_number(QUOTATION_NUMBER_PREFIX, today),
        "date": today,
        "items": [_blank_item()],
        "taxRate": 0.0,
        "status": QuotationStatus.PENDING.value,
        "notes": "",
    }


def new_receipt_defaults(today: Optional[str] = None) -> Dict[str, Any]:
    today = today or today_iso()
    return {
        "vendorName": "",
        "vendorEmail": "",
        "receiptNumber": generate_document_number(RECEIPT_NUMBER_PREFIX, today),
        "date": today,
        "items": [_blank_item()],
        "taxRate": 0.0,
        "paymentMethod": PaymentMethod.CASH.value,
        "notes": "",
    }
