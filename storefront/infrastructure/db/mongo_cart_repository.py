# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.errors import ConflictError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.models.cart import Cart, CartItem, PAYMENT_OPTION_DEFAULT
from ...domain.constants import CartFields
from .mongo_connection import get_cart_collection, version_guard
from .mongo_product_repository import document_to_product, product_to_document

logger = logging.getLogger(__name__)


class MongoCartRepository(CartRepository):
    """MongoDB implementation of CartRepository"""

    def __init__(self, cart_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.cart_collection = cart_collection if cart_collection is not None else get_cart_collection()

    async def find_by_email(self, email: str) -> Optional[Cart]:
        """
        Find the cart owned by a user

        Args:
            email: Owner's email address

        Returns:
            Cart domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.cart_collection.find_one({CartFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_cart(document)
        except Exception as e:
            raise RuntimeError(f"Error finding cart by email: {str(e)}")

    async def create(self, email: str) -> Optional[Cart]:
        """
        Create an empty cart for a user

        Implemented as an upsert on the owner's email, so a concurrent
        creation returns the cart the other request created.

        Args:
            email: Owner's email address

        Returns:
            The created (or already existing) Cart, None if nothing came back
        """
        if not email:
            raise ValueError("Cart owner email is required")

        now = datetime.now(timezone.utc)
        try:
            document = await self.cart_collection.find_one_and_update(
                {CartFields.EMAIL: email},
                {
                    "$setOnInsert": {
                        CartFields.EMAIL: email,
                        CartFields.CART_ITEMS: [],
                        CartFields.PAYMENT_OPTION: PAYMENT_OPTION_DEFAULT,
                        CartFields.VERSION: 0,
                        CartFields.CREATED_AT: now,
                        CartFields.UPDATED_AT: now,
                    }
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            # Lost an upsert race against another request for the same email
            return await self.find_by_email(email)
        except Exception as e:
            raise RuntimeError(f"Error creating cart: {str(e)}")

        if document is None:
            return None
        logger.info(f"Cart {document[CartFields.MONGO_ID]} ready for {email}")
        return self._document_to_cart(document)

    async def save(self, cart: Cart) -> Cart:
        """
        Save an existing cart

        Args:
            cart: Cart domain model to save

        Returns:
            The same Cart with its version advanced

        Raises:
            ConflictError: If the stored cart changed since it was loaded
        """
        if not cart:
            raise ValueError("Cart cannot be None")
        if not cart.id:
            raise ValueError("Cart must be created before it can be saved")

        try:
            object_id = ObjectId(cart.id)
        except (InvalidId, ValueError, TypeError):
            raise ValueError(f"Invalid cart ID format: {cart.id}")

        now = datetime.now(timezone.utc)
        try:
            update_result = await self.cart_collection.update_one(
                {CartFields.MONGO_ID: object_id, **version_guard(CartFields.VERSION, cart.version)},
                {
                    "$set": {
                        CartFields.CART_ITEMS: [self._item_to_dict(item) for item in cart.cart_items],
                        CartFields.PAYMENT_OPTION: cart.payment_option,
                        CartFields.UPDATED_AT: now,
                    },
                    "$inc": {CartFields.VERSION: 1},
                }
            )
        except Exception as e:
            raise RuntimeError(f"Error saving cart: {str(e)}")

        if update_result.matched_count == 0:
            raise ConflictError("Cart was modified concurrently, please retry")

        cart.version += 1
        cart.updated_at = now
        return cart

    def _document_to_cart(self, document: Dict[str, Any]) -> Cart:
        """
        Convert MongoDB document to Cart domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Cart domain model
        """
        if not document or CartFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        items = [
            CartItem(
                product=document_to_product(item[CartFields.PRODUCT]),
                quantity=item.get(CartFields.QUANTITY, 0),
            )
            for item in document.get(CartFields.CART_ITEMS, [])
        ]

        return Cart(
            id=str(document[CartFields.MONGO_ID]),
            email=document.get(CartFields.EMAIL, ""),
            cart_items=items,
            payment_option=document.get(CartFields.PAYMENT_OPTION, PAYMENT_OPTION_DEFAULT),
            version=document.get(CartFields.VERSION, 0),
            created_at=document.get(CartFields.CREATED_AT),
            updated_at=document.get(CartFields.UPDATED_AT),
        )

    def _item_to_dict(self, item: CartItem) -> Dict[str, Any]:
        return {
            CartFields.PRODUCT: product_to_document(item.product),
            CartFields.QUANTITY: item.quantity,
        }
