# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, CartFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client, if one was opened."""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB
    
    Returns:
        MongoDB collection for products
    """
    return get_database()["products"]


def get_cart_collection() -> AsyncIOMotorCollection:
    """
    Get carts collection from MongoDB
    
    Returns:
        MongoDB collection for carts
    """
    return get_database()["carts"]


async def ensure_indexes() -> None:
    """
    Create the unique indexes the domain relies on.
    
    One account per email and one cart per email are enforced here so that
    concurrent registrations or first adds cannot create duplicates.
    """
    await get_user_collection().create_index(UserFields.EMAIL, unique=True)
    await get_cart_collection().create_index(CartFields.EMAIL, unique=True)
    logger.info("MongoDB indexes ensured for users and carts")


def version_guard(field: str, version: int) -> dict:
    """
    Filter clause matching a document still at ``version``.
    
    Documents written before versioning was introduced carry no counter and
    count as version 0.
    """
    if version == 0:
        return {"$or": [{field: 0}, {field: {"$exists": False}}]}
    return {field: version}
