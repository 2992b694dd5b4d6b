# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ...core.errors import ValidationError


@dataclass
class Product:
    """Catalogue record. Read-only from the cart's point of view."""
    id: Optional[str]
    name: str
    cost: float
    category: str = ""
    rating: float = 0.0
    image: str = ""

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise ValidationError("Product name is required")
        if self.cost is None or self.cost < 0:
            raise ValidationError("Product cost cannot be negative")


def normalize_product_id(product_id: str) -> str:
    """Product ids are ObjectId hex strings, which compare case-insensitively."""
    return (product_id or "").strip().lower()
