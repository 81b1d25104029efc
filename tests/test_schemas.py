"""
Unit tests for the document data models
"""

from quotebook.models.schemas import (
    Invoice, Quotation, Receipt, LineItem, InvoiceStatus, QuotationStatus, PaymentMethod, to_camel
)


def test_to_camel():
    assert to_camel("sub_total") == "subTotal"
    assert to_camel("payment_method") == "paymentMethod"
    assert to_camel("id") == "id"


def test_invoice_to_dict_uses_stored_shape():
    """Keys are camelCase, enums are plain strings and unset optionals are omitted."""
    invoice = Invoice(
        id="a1",
        customer_name="MegaCorp Solutions",
        invoice_number="INV-2025-001",
        issue_date="2025-07-01",
        due_date="2025-07-31",
        items=[LineItem(description="Hosting", quantity=1, unit_price=50.0, total=50.0)],
        sub_total=50.0,
        tax_amount=0.0,
        total_amount=50.0,
        status=InvoiceStatus.PAID,
        created_at="2025-07-01",
    )

    data = invoice.to_dict()

    assert data["customerName"] == "MegaCorp Solutions"
    assert data["status"] == "paid"
    assert data["items"] == [{"description": "Hosting", "quantity": 1, "unitPrice": 50.0, "total": 50.0}]
    assert "taxRate" not in data
    assert "customerEmail" not in data
    assert "notes" not in data
    assert Invoice.from_dict(data) == invoice


def test_receipt_from_dict_restores_enum():
    receipt = Receipt.from_dict({"vendorName": "Office Depot", "paymentMethod": "bank_transfer"})

    assert receipt.payment_method is PaymentMethod.BANK_TRANSFER
    assert receipt.items == []


def test_quotation_from_single_item_layout():
    """Quotations stored with one inline item load with an item list."""
    quotation = Quotation.from_dict({
        "id": "q1",
        "customerName": "Blue Harbor Cafe",
        "itemDescription": "Point of Sale Setup",
        "quantity": 2,
        "unitPrice": 325,
        "totalAmount": 650,
        "date": "2025-06-28",
        "status": "approved",
    })

    assert quotation.status == QuotationStatus.APPROVED
    assert quotation.items == [LineItem(description="Point of Sale Setup", quantity=2.0, unit_price=325.0, total=650.0)]
    assert quotation.total_amount == 650


def test_copy_is_independent():
    """Copies do not share their item list or items."""
    original = Invoice(items=[LineItem(description="Widget", quantity=1, unit_price=2.0)])

    copied = original.copy(customer_name="Other")
    copied.items[0].quantity = 5
    copied.items.append(LineItem())

    assert original.items == [LineItem(description="Widget", quantity=1, unit_price=2.0)]
    assert copied.customer_name == "Other"
