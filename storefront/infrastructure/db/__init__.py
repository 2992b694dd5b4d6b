from .mongo_connection import (
    get_database,
    get_user_collection,
    get_product_collection,
    get_cart_collection,
    ensure_indexes,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository
from .mongo_cart_repository import MongoCartRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_product_collection",
    "get_cart_collection",
    "ensure_indexes",
    "MongoUserRepository",
    "MongoProductRepository",
    "MongoCartRepository",
]
