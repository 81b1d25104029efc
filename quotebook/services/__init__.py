"""Services for document totals, form parsing and form defaults."""

from quotebook.services.total_calculator import (
    round2, calculate_line_total, calculate_totals, with_line_totals
)
from quotebook.services.form_parser import (
    parse_invoice_form, parse_quotation_form, parse_receipt_form, preview_totals
)
from quotebook.services.document_defaults import (
    generate_document_number, default_due_date,
    new_invoice_defaults, new_quotation_defaults, new_receipt_defaults
)

__all__ = [
    "round2",
    "calculate_line_total",
    "calculate_totals",
    "with_line_totals",
    "parse_invoice_form",
    "parse_quotation_form",
    "parse_receipt_form",
    "preview_totals",
    "generate_document_number",
    "default_due_date",
    "new_invoice_defaults",
    "new_quotation_defaults",
    "new_receipt_defaults",
]
