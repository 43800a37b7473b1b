"""Warranty claim form and the support ticket derived from it."""

from dataclasses import dataclass
from typing import Any

SUBJECT_PREFIX = "Warranty Claim for "

BODY_LABELS = [
    "Name",
    "Email",
    "Phone",
    "SKU",
    "Purchase Date",
    "Description",
    "Personal Injury",
]

BASE_TAGS = ("warranty",)
INJURY_TAG = "personal_injury"


@dataclass
class ClaimForm:
    name: str = ""
    email: str = ""
    phone: str = ""
    sku: str = ""
    purchase_date: str = ""
    description: str = ""
    injury: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClaimForm":
        """Build a form from widget field values, accepting camelCase or snake_case date keys."""
        purchase_date = data.get("purchaseDate", data.get("purchase_date"))
        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            sku=_text(data.get("sku")),
            purchase_date=_text(purchase_date),
            description=_text(data.get("description")),
            injury=_flag(data.get("injury")),
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _flag(value: Any) -> bool:
    """Only a real ``True`` or the string "true" flags an injury."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() == "true"


@dataclass(frozen=True)
class TicketPayload:
    subject: str
    body: str
    priority: str = "normal"
    tags: tuple[str, ...] = BASE_TAGS


def build_ticket(form: ClaimForm) -> TicketPayload:
    """Render a claim form as a ticket. The body always lists all seven fields in a fixed order."""
    values = [
        form.name,
        form.email,
        form.phone,
        form.sku,
        form.purchase_date,
        form.description,
        "Yes" if form.injury else "No",
    ]
    body = "\n".join(f"{label}: {value}" for label, value in zip(BODY_LABELS, values, strict=True))

    if form.injury:
        return TicketPayload(
            subject=SUBJECT_PREFIX + form.sku,
            body=body,
            priority="urgent",
            tags=(*BASE_TAGS, INJURY_TAG),
        )
    return TicketPayload(subject=SUBJECT_PREFIX + form.sku, body=body)
