from .user import User
from .product import Product
from .cart import Cart, CartItem

__all__ = ["User", "Product", "Cart", "CartItem"]
