# Standard library imports
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

# Local application imports
from .product import Product


PAYMENT_OPTION_DEFAULT = "PAYMENT_OPTION_DEFAULT"


@dataclass
class CartItem:
    """
    One line of a cart.

    ``product`` is a copy of the catalogue record taken when the item was
    added. Later catalogue changes (price included) do not reach it.
    """
    product: Product
    quantity: int

    @property
    def product_id(self) -> Optional[str]:
        return self.product.id

    @property
    def subtotal(self) -> float:
        return self.quantity * self.product.cost


@dataclass
class Cart:
    """
    Per-user collection of line items, keyed by the owner's email.

    Invariants kept by the methods below: at most one item per product and
    no item with a quantity of zero or less.
    """
    id: Optional[str]
    email: str
    cart_items: List[CartItem] = field(default_factory=list)
    payment_option: str = PAYMENT_OPTION_DEFAULT
    version: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.email:
            raise ValueError("Cart owner email is required")

    @property
    def is_empty(self) -> bool:
        return len(self.cart_items) == 0

    def find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.cart_items:
            if item.product_id == product_id:
                return item
        return None

    def contains(self, product_id: str) -> bool:
        return self.find_item(product_id) is not None

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """
        Append a snapshot of ``product``.

        Raises:
            ValueError: If the product is already in the cart
        """
        if self.contains(product.id):
            raise ValueError(f"Product {product.id} already in cart")
        item = CartItem(product=replace(product), quantity=quantity)
        self.cart_items.append(item)
        return item

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Overwrite the item's quantity; a non-positive quantity removes it."""
        if quantity <= 0:
            self.remove_item(product_id)
            return
        item = self.find_item(product_id)
        if item is None:
            raise ValueError(f"Product {product_id} not in cart")
        item.quantity = quantity

    def remove_item(self, product_id: str) -> int:
        """Remove every item for ``product_id`` and return how many were dropped."""
        remaining = [item for item in self.cart_items if item.product_id != product_id]
        removed = len(self.cart_items) - len(remaining)
        self.cart_items = remaining
        return removed

    def clear(self) -> None:
        self.cart_items = []

    def total_cost(self) -> float:
        return sum(item.subtotal for item in self.cart_items)
