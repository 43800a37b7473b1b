"""Static product catalog and help content shown by the intake widget."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    sku: str
    name: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.sku})"


PRODUCTS: tuple[Product, ...] = (
    Product(sku="HT-JACK", name="2 TON FLOOR JACK"),
    Product(sku="HT-STAND", name="2 TON JACK STANDS"),
    Product(sku="HT-CREEPER", name="40\" MECHANIC'S CREEPER"),
)

TROUBLESHOOTING_TIPS: tuple[str, ...] = (
    "Ensure the jack or stand is on a level surface before use.",
    "Inspect for oil leaks or worn components and replace as necessary.",
    "Refer to the included manual for setup, safety and maintenance.",
)

CONFIRMATION_MESSAGE = (
    "Thank you for contacting Hyper Tough warranty support. Your claim has been "
    "received and will be processed. You will receive an email confirmation "
    "shortly. If you flagged an injury, a representative will contact you directly."
)


def get_product(sku: str) -> Product | None:
    """Look up a product by SKU (case-insensitive)."""
    wanted = sku.strip().upper()
    for product in PRODUCTS:
        if product.sku == wanted:
            return product
    return None


def product_choices() -> list[dict[str, str]]:
    """Return the SKU choices in display order for the claim form's select box."""
    return [{"sku": p.sku, "name": p.name, "label": p.label} for p in PRODUCTS]
