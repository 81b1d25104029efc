"""
Data models for the invoice, quotation and receipt collections.

Records are plain dataclasses with snake_case attributes. The persisted
JSON uses camelCase keys (``customerName``, ``subTotal``, ``createdAt``)
so collections written by the browser version of the book load unchanged.
"""
from typing import Optional, Dict, Any, List, ClassVar, Type, TypeVar
from dataclasses import dataclass, field, fields, replace
import enum


# Enums
class InvoiceStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class QuotationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    CHEQUE = "cheque"
    MOBILE_MONEY = "mobile_money"
    OTHER = "other"


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase JSON key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


D = TypeVar("D", bound="BaseDocument")


@dataclass
class LineItem:
    description: str = ""
    quantity: float = 0.0
    unit_price: float = 0.0
    total: float = 0.0  # quantity x unit_price, rounded to cents

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            description=data.get("description", ""),
            quantity=float(data.get("quantity") or 0),
            unit_price=float(data.get("unitPrice") or 0),
            total=float(data.get("total") or 0),
        )


@dataclass(frozen=True)
class DocumentTotals:
    sub_total: float = 0.0
    tax_amount: float = 0.0
    total_amount: float = 0.0


# Base model with the fields every document kind shares
@dataclass
class BaseDocument:
    id: str = ""
    items: List[LineItem] = field(default_factory=list)
    sub_total: float = 0.0
    tax_rate: Optional[float] = None  # fraction, e.g. 0.15 for 15%
    tax_amount: float = 0.0
    total_amount: float = 0.0
    notes: Optional[str] = None
    created_at: str = ""  # YYYY-MM-DD, set once by the store

    # Enum-typed attributes, restored from their string values on load
    ENUM_FIELDS: ClassVar[Dict[str, Type[enum.Enum]]] = {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted camelCase shape, omitting unset optionals."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "items":
                value = [item.to_dict() for item in value]
            elif isinstance(value, enum.Enum):
                value = value.value
            data[to_camel(f.name)] = value
        return data

    @classmethod
    def from_dict(cls: Type[D], data: Dict[str, Any]) -> D:
        """Build a record from its persisted shape; unknown keys are ignored."""
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            key = to_camel(f.name)
            if key not in data:
                continue
            value = data[key]
            if f.name == "items":
                value = [LineItem.from_dict(item) for item in value or []]
            elif f.name in cls.ENUM_FIELDS and value is not None:
                value = cls.ENUM_FIELDS[f.name](value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def copy(self: D, **changes: Any) -> D:
        """Return a copy with its own item list, applying ``changes``."""
        items = [replace(item) for item in changes.pop("items", self.items)]
        return replace(self, items=items, **changes)


@dataclass
class Invoice(BaseDocument):
    customer_name: str = ""
    customer_email: Optional[str] = None
    invoice_number: str = ""  # e.g. INV-2025-0001
    issue_date: str = ""
    due_date: str = ""
    status: InvoiceStatus = InvoiceStatus.DRAFT

    ENUM_FIELDS: ClassVar[Dict[str, Type[enum.Enum]]] = {"status": InvoiceStatus}


@dataclass
class Quotation(BaseDocument):
    customer_name: str = ""
    customer_email: Optional[str] = None
    quotation_number: str = ""  # e.g. QUO-2025-0001
    date: str = ""
    status: QuotationStatus = QuotationStatus.PENDING

    ENUM_FIELDS: ClassVar[Dict[str, Type[enum.Enum]]] = {"status": QuotationStatus}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quotation":
        # Older quotations carried a single item inline instead of an item list
        if "items" not in data and "itemDescription" in data:
            data = dict(data)
            data["items"] = [{
                "description": data.get("itemDescription", ""),
                "quantity": data.get("quantity"),
                "unitPrice": data.get("unitPrice"),
                "total": data.get("totalAmount"),
            }]
        return super().from_dict(data)


@dataclass
class Receipt(BaseDocument):
    vendor_name: str = ""
    vendor_email: Optional[str] = None
    receipt_number: str = ""  # e.g. REC-2025-0001
    date: str = ""
    payment_method: PaymentMethod = PaymentMethod.CASH

    ENUM_FIELDS: ClassVar[Dict[str, Type[enum.Enum]]] = {"payment_method": PaymentMethod}
