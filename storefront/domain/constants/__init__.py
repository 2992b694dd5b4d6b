"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields
from .cart_fields import CartFields

__all__ = [
    "UserFields",
    "ProductFields",
    "CartFields",
]
