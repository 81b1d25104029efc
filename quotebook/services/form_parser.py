"""
Form-to-domain parsing for invoices, quotations and receipts.

Form input arrives loosely typed: numbers as strings, empty strings for
untouched fields, camelCase keys. These parsers are the one place that input
is coerced and validated. They either return a typed record ready for the
total calculator and the record stores, or raise FormValidationError listing
every invalid field.
"""

import re
import enum
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from quotebook.exceptions import FormValidationError
from quotebook.models.schemas import (
    Invoice, Quotation, Receipt, LineItem, DocumentTotals,
    InvoiceStatus, QuotationStatus, PaymentMethod
)
from quotebook.services.total_calculator import calculate_line_total, calculate_totals
from quotebook.utils.parsing import is_iso_date, parse_amount

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_NAME_LENGTH = 2
MIN_NUMBER_LENGTH = 3
MIN_ITEM_QUANTITY = 1
MIN_UNIT_PRICE = 0.01

# Receipts record what was actually paid, free items included
MIN_VENDOR_NAME_LENGTH = 1
MIN_RECEIPT_QUANTITY = 0
MIN_RECEIPT_UNIT_PRICE = 0


class _FormReader:
    """Reads fields from a raw form, collecting errors instead of stopping at the first."""

    def __init__(self, raw: Mapping[str, Any]):
        self.raw = raw
        self.errors: Dict[str, List[str]] = {}

    def error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def text(self, key: str, label: str, min_length: int = 1) -> str:
        value = self.raw.get(key)
        value = value.strip() if isinstance(value, str) else ""
        if len(value) < min_length:
            if min_length <= 1:
                self.error(key, f"{label} is required.")
            else:
                self.error(key, f"{label} must be at least {min_length} characters.")
        return value

    def optional_text(self, key: str) -> Optional[str]:
        value = self.raw.get(key)
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    def email(self, key: str) -> Optional[str]:
        value = self.optional_text(key)
        if value is not None and not EMAIL_PATTERN.match(value):
            self.error(key, "Invalid email address.")
        return value

    def iso_date(self, key: str, label: str) -> str:
        value = self.raw.get(key)
        if not is_iso_date(value):
            self.error(key, f"{label} must be YYYY-MM-DD.")
            return ""
        return value

    def number(self, key: str, label: str, raw_value: Any, minimum: Optional[float] = None,
               maximum: Optional[float] = None, required: bool = True) -> Optional[float]:
        if raw_value is None or (isinstance(raw_value, str) and not raw_value.strip()):
            if required:
                self.error(key, f"{label} is required.")
            return None

        value = parse_amount(raw_value)
        if value is None:
            self.error(key, f"{label} must be a number.")
            return None
        if minimum is not None and value < minimum:
            self.error(key, f"{label} must be at least {minimum:g}.")
        if maximum is not None and value > maximum:
            self.error(key, f"{label} cannot exceed {maximum:g}.")
        return value

    def choice(self, key: str, label: str, enum_type: Type[enum.Enum]) -> Optional[enum.Enum]:
        value = self.raw.get(key)
        try:
            return enum_type(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            self.error(key, f"Please select a valid {label} ({allowed}).")
            return None

    def tax_rate(self) -> Optional[float]:
        return self.number(
            "taxRate", "Tax rate", self.raw.get("taxRate"),
            minimum=0, maximum=1, required=False,
        )

    def items(self, raw_items: Any, required: bool, min_quantity: float = MIN_ITEM_QUANTITY,
              min_unit_price: float = MIN_UNIT_PRICE) -> List[LineItem]:
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            self.error("items", "Items must be a list.")
            return []
        if required and not raw_items:
            self.error("items", "At least one item is required.")

        items = []
        for index, raw_item in enumerate(raw_items):
            prefix = f"items[{index}]"
            if not isinstance(raw_item, Mapping):
                self.error(prefix, "Item must be an object.")
                continue

            description = raw_item.get("description")
            description = description.strip() if isinstance(description, str) else ""
            if not description:
                self.error(f"{prefix}.description", "Item description is required.")

            quantity = self.number(
                f"{prefix}.quantity", "Quantity", raw_item.get("quantity"), minimum=min_quantity
            )
            unit_price = self.number(
                f"{prefix}.unitPrice", "Unit price", raw_item.get("unitPrice"), minimum=min_unit_price
            )
            quantity = quantity or 0.0
            unit_price = unit_price or 0.0
            items.append(LineItem(
                description=description,
                quantity=quantity,
                unit_price=unit_price,
                total=calculate_line_total(quantity, unit_price),
            ))
        return items

    def finish(self, kind: str) -> None:
        if self.errors:
            logger.info(f"Rejected {kind} form with {len(self.errors)} invalid fields")
            raise FormValidationError(self.errors)


def _reader_for(raw: Any) -> _FormReader:
    if not isinstance(raw, Mapping):
        raise FormValidationError({"form": ["Form data must be an object."]})
    return _FormReader(raw)


def _record_id(raw: Mapping[str, Any]) -> str:
    value = raw.get("id")
    return value if isinstance(value, str) else ""


def preview_totals(raw: Mapping[str, Any]) -> DocumentTotals:
    """
    Totals for a form that is still being edited.

    Nothing is validated: unreadable or empty quantities, prices and tax
    rates count as zero, so a half-filled form still shows running totals.
    """
    if not isinstance(raw, Mapping):
        return calculate_totals([])

    raw_items = raw.get("items")
    if raw_items is None and "itemDescription" in raw:
        raw_items = [raw]
    if not isinstance(raw_items, list):
        raw_items = []

    items = [
        LineItem(
            quantity=parse_amount(item.get("quantity")) or 0.0,
            unit_price=parse_amount(item.get("unitPrice")) or 0.0,
        )
        for item in raw_items
        if isinstance(item, Mapping)
    ]
    return calculate_totals(items, parse_amount(raw.get("taxRate")))


def parse_invoice_form(raw: Mapping[str, Any]) -> Invoice:
    """
    Validate invoice form values and build an Invoice.

    Args:
        raw: Form values keyed by their camelCase names

    Returns:
        Invoice with line totals filled in; document totals are left for the store

    Raises:
        FormValidationError: If any field is invalid
    """
    form = _reader_for(raw)
    invoice = Invoice(
        id=_record_id(raw),
        customer_name=form.text("customerName", "Customer name", MIN_NAME_LENGTH),
        customer_email=form.email("customerEmail"),
        invoice_number=form.text("invoiceNumber", "Invoice number", MIN_NUMBER_LENGTH),
        issue_date=form.iso_date("issueDate", "Issue date"),
        due_date=form.iso_date("dueDate", "Due date"),
        items=form.items(raw.get("items"), required=True),
        tax_rate=form.tax_rate(),
        status=form.choice("status", "status", InvoiceStatus),
        notes=form.optional_text("notes"),
    )
    form.finish("invoice")
    return invoice


def parse_quotation_form(raw: Mapping[str, Any]) -> Quotation:
    """
    Validate quotation form values and build a Quotation.

    A form in the older single-item layout (itemDescription, quantity,
    unitPrice) is read as a one-item list.
    """
    form = _reader_for(raw)

    raw_items = raw.get("items")
    if raw_items is None and "itemDescription" in raw:
        raw_items = [{
            "description": raw.get("itemDescription"),
            "quantity": raw.get("quantity"),
            "unitPrice": raw.get("unitPrice"),
        }]

    quotation = Quotation(
        id=_record_id(raw),
        customer_name=form.text("customerName", "Customer name", MIN_NAME_LENGTH),
        customer_email=form.email("customerEmail"),
        quotation_number=form.text("quotationNumber", "Quotation number", MIN_NUMBER_LENGTH),
        date=form.iso_date("date", "Date"),
        items=form.items(raw_items, required=True),
        tax_rate=form.tax_rate(),
        status=form.choice("status", "status", QuotationStatus),
        notes=form.optional_text("notes"),
    )
    form.finish("quotation")
    return quotation


def parse_receipt_form(raw: Mapping[str, Any]) -> Receipt:
    """
    Validate receipt form values and build a Receipt.

    Receipts may have no items, and their items may be free: quantity and
    unit price only have to be non-negative.
    """
    form = _reader_for(raw)
    receipt = Receipt(
        id=_record_id(raw),
        vendor_name=form.text("vendorName", "Vendor name", MIN_VENDOR_NAME_LENGTH),
        vendor_email=form.email("vendorEmail"),
        receipt_number=form.text("receiptNumber", "Receipt number", MIN_NUMBER_LENGTH),
        date=form.iso_date("date", "Date"),
        items=form.items(
            raw.get("items"), required=False,
            min_quantity=MIN_RECEIPT_QUANTITY, min_unit_price=MIN_RECEIPT_UNIT_PRICE,
        ),
        tax_rate=form.tax_rate(),
        payment_method=form.choice("paymentMethod", "payment method", PaymentMethod),
        notes=form.optional_text("notes"),
    )
    form.finish("receipt")
    return receipt
