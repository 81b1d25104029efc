"""Sample documents for seeding an empty book during development."""

from typing import List

from quotebook.models.schemas import Invoice, Quotation, Receipt

# Totals are left out; the store computes them when seeding
INVOICE_DATA = [
    {
        "customerName": "MegaCorp Solutions",
        "customerEmail": "contact@megacorp.com",
        "invoiceNumber": "INV-2025-001",
        "issueDate": "2025-07-01",
        "dueDate": "2025-07-31",
        "items": [
            {"description": "Web Development Phase 1", "quantity": 1, "unitPrice": 2500.00},
            {"description": "Hosting Fee (July)", "quantity": 1, "unitPrice": 50.00},
        ],
        "taxRate": 0.08,
        "status": "sent",
        "notes": "Initial project setup and design.",
        "createdAt": "2025-07-01",
    },
    {
        "customerName": "Tech Innovations Ltd.",
        "customerEmail": "info@techinnovations.com",
        "invoiceNumber": "INV-2025-002",
        "issueDate": "2025-06-20",
        "dueDate": "2025-07-20",
        "items": [
            {"description": "Software License Renewal (Annual)", "quantity": 1, "unitPrice": 1200.00},
        ],
        "taxRate": 0.08,
        "status": "paid",
        "notes": "Thank you for your prompt payment!",
        "createdAt": "2025-06-15",
    },
]

QUOTATION_DATA = [
    {
        "customerName": "Northwind Traders",
        "quotationNumber": "QUO-2025-001",
        "date": "2025-07-02",
        "items": [
            {"description": "Office Network Installation", "quantity": 1, "unitPrice": 1800.00},
            {"description": "Wireless Access Point", "quantity": 4, "unitPrice": 120.00},
        ],
        "taxRate": 0.08,
        "status": "pending",
        "createdAt": "2025-07-02",
    },
    {
        "customerName": "Blue Harbor Cafe",
        "quotationNumber": "QUO-2025-002",
        "date": "2025-06-28",
        "items": [
            {"description": "Point of Sale Setup", "quantity": 1, "unitPrice": 650.00},
        ],
        "status": "approved",
        "createdAt": "2025-06-28",
    },
]

RECEIPT_DATA = [
    {
        "vendorName": "Office Depot",
        "receiptNumber": "REC-2025-001",
        "date": "2025-07-05",
        "items": [
            {"description": "Printer Paper (Case)", "quantity": 2, "unitPrice": 35.00},
            {"description": "Black Ink Cartridge", "quantity": 1, "unitPrice": 45.00},
        ],
        "taxRate": 0.05,
        "paymentMethod": "card",
        "createdAt": "2025-07-05",
    },
    {
        "vendorName": "Local Cafe",
        "receiptNumber": "REC-2025-002",
        "date": "2025-07-03",
        "items": [
            {"description": "Coffee (Large)", "quantity": 3, "unitPrice": 4.50},
            {"description": "Pastry", "quantity": 2, "unitPrice": 3.00},
        ],
        "taxRate": 0.0,
        "paymentMethod": "cash",
        "createdAt": "2025-07-03",
    },
]


def sample_invoices() -> List[Invoice]:
    return [Invoice.from_dict(data) for data in INVOICE_DATA]


def sample_quotations() -> List[Quotation]:
    return [Quotation.from_dict(data) for data in QUOTATION_DATA]


def sample_receipts() -> List[Receipt]:
    return [Receipt.from_dict(data) for data in RECEIPT_DATA]
