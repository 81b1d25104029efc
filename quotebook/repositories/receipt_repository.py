"""Repository for Receipt records."""

import logging
from typing import List

from quotebook.config import RECEIPTS_STORAGE_KEY
from quotebook.models.schemas import Receipt, PaymentMethod
from quotebook.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)


class ReceiptRepository(RecordStore[Receipt]):
    """Repository for Receipt data operations."""

    storage_key = RECEIPTS_STORAGE_KEY
    record_type = Receipt

    def get_by_payment_method(self, payment_method: PaymentMethod) -> List[Receipt]:
        """Get receipts paid with the given method, in insertion order."""
        return [rec for rec in self.list() if rec.payment_method == payment_method]
