from .user_repository import UserRepository
from .product_repository import ProductRepository
from .cart_repository import CartRepository

__all__ = ["UserRepository", "ProductRepository", "CartRepository"]
