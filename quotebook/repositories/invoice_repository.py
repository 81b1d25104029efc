"""Repository for Invoice records."""

import logging
from typing import List

from quotebook.config import INVOICES_STORAGE_KEY
from quotebook.models.schemas import Invoice, InvoiceStatus
from quotebook.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)


class InvoiceRepository(RecordStore[Invoice]):
    """Repository for Invoice data operations."""

    storage_key = INVOICES_STORAGE_KEY
    record_type = Invoice

    def get_by_invoice_number(self, invoice_number: str) -> List[Invoice]:
        """Get invoices by invoice number."""
        return [inv for inv in self.list() if inv.invoice_number == invoice_number]

    def get_by_status(self, status: InvoiceStatus) -> List[Invoice]:
        """Get invoices with the given status, in insertion order."""
        return [inv for inv in self.list() if inv.status == status]
