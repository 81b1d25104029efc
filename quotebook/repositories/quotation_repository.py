"""Repository for Quotation records."""

import logging
from typing import List

from quotebook.config import QUOTATIONS_STORAGE_KEY
from quotebook.models.schemas import Quotation, QuotationStatus
from quotebook.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)


class QuotationRepository(RecordStore[Quotation]):
    """Repository for Quotation data operations."""

    storage_key = QUOTATIONS_STORAGE_KEY
    record_type = Quotation

    def _prepare_new(self, record: Quotation) -> Quotation:
        # A quotation without a date is dated the day it is added
        if not record.date:
            return record.copy(date=record.created_at)
        return record

    def get_by_status(self, status: QuotationStatus) -> List[Quotation]:
        """Get quotations with the given status, in insertion order."""
        return [q for q in self.list() if q.status == status]
