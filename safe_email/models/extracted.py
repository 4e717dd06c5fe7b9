"""
Extraction result models.

All models are frozen and hold tuples so a result can be cached and shared
between renders without risk of mutation. ``to_dict()`` produces the
camelCase contract consumed by the UI (see EXTRACTED_DATA_SCHEMA); optional
fields that are absent are omitted.
"""
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

FinancialKind = Literal["profit", "fee", "price"]
ContactKind = Literal["phone", "email", "website"]
ImageRole = Literal["signature", "header", "content", "attachment"]


def _drop_none(values: dict) -> dict:
    return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class FinancialItem:
    """An amount found next to a profit, price or fee label."""

    kind: FinancialKind
    amount: float
    currency: str
    label: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "amount": self.amount,
            "currency": self.currency,
            "label": self.label,
        }


@dataclass(frozen=True)
class ContactItem:
    kind: ContactKind
    value: str
    label: Optional[str] = None

    def to_dict(self) -> dict:
        return _drop_none({"kind": self.kind, "value": self.value, "label": self.label})


@dataclass(frozen=True)
class BusinessInfo:
    """Sender identity recovered from the trailing signature block."""

    name: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    phone: Tuple[str, ...] = ()
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(
            (self.name, self.title, self.company, self.phone,
             self.email, self.website, self.address)
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "name": self.name,
            "title": self.title,
            "company": self.company,
            "phone": list(self.phone) if self.phone else None,
            "email": self.email,
            "website": self.website,
            "address": self.address,
        })


@dataclass(frozen=True)
class EmailImage:
    src: str
    role: ImageRole = "content"
    alt: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None

    def to_dict(self) -> dict:
        return _drop_none({
            "src": self.src,
            "alt": self.alt,
            "width": self.width,
            "height": self.height,
            "role": self.role,
        })


@dataclass(frozen=True)
class ExtractedData:
    """Aggregate of every extractor's output for one email body."""

    financial_data: Tuple[FinancialItem, ...] = ()
    booking_refs: Tuple[str, ...] = ()
    contact_info: Tuple[ContactItem, ...] = ()
    business_info: Optional[BusinessInfo] = None
    images: Tuple[EmailImage, ...] = field(default=())

    @classmethod
    def empty(cls) -> "ExtractedData":
        return cls()

    @property
    def item_count(self) -> int:
        """Count shown on the enhanced view badge."""
        return len(self.financial_data) + len(self.booking_refs) + len(self.images)

    def to_dict(self) -> dict:
        return {
            "financialData": [f.to_dict() for f in self.financial_data],
            "bookingRefs": list(self.booking_refs),
            "contactInfo": [c.to_dict() for c in self.contact_info],
            "businessInfo": self.business_info.to_dict() if self.business_info else None,
            "images": [i.to_dict() for i in self.images],
        }
