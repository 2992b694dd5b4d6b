# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .mongo_connection import get_product_collection


def document_to_product(document: Dict[str, Any]) -> Product:
    """
    Convert a product document (catalogue record or cart snapshot) to a Product

    Args:
        document: MongoDB document dictionary

    Returns:
        Product domain model
    """
    if not document or ProductFields.MONGO_ID not in document:
        raise ValueError("Invalid document: missing _id field")

    return Product(
        id=str(document[ProductFields.MONGO_ID]),
        name=document.get(ProductFields.NAME, ""),
        cost=document.get(ProductFields.COST, 0),
        category=document.get(ProductFields.CATEGORY, ""),
        rating=document.get(ProductFields.RATING, 0),
        image=document.get(ProductFields.IMAGE, ""),
    )


def product_to_document(product: Product) -> Dict[str, Any]:
    """
    Convert Product domain model to a document (used for cart snapshots)

    Args:
        product: Product domain model

    Returns:
        Dictionary ready for MongoDB storage
    """
    product_id: Any = product.id
    try:
        product_id = ObjectId(product.id)
    except (InvalidId, ValueError, TypeError):
        # Keep non-ObjectId identifiers as plain strings
        pass

    return {
        ProductFields.MONGO_ID: product_id,
        ProductFields.NAME: product.name,
        ProductFields.CATEGORY: product.category,
        ProductFields.COST: product.cost,
        ProductFields.RATING: product.rating,
        ProductFields.IMAGE: product.image,
    }


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""

    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = product_collection if product_collection is not None else get_product_collection()

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: The product ID to find

        Returns:
            Product domain model if found, None otherwise (also for malformed IDs)
        """
        if not product_id:
            return None

        try:
            object_id = ObjectId(product_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: object_id})
            if document is None:
                return None
            return document_to_product(document)
        except Exception as e:
            raise RuntimeError(f"Error finding product by ID: {str(e)}")

    async def list_all(self) -> List[Product]:
        """
        List every product in the catalogue

        Returns:
            List of Product domain models
        """
        try:
            cursor = self.product_collection.find({})
            products = []
            async for document in cursor:
                products.append(document_to_product(document))
            return products
        except Exception as e:
            raise RuntimeError(f"Error listing products: {str(e)}")
