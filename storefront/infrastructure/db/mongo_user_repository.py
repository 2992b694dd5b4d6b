# Standard library imports
from datetime import datetime, timezone
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.errors import ApiError, BadRequestError, ConflictError
from ...core.security import hash_password
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection, version_guard


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        default_address: str = "ADDRESS_NOT_SET",
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.default_address = default_address

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        A plaintext password marked as modified is replaced by its bcrypt
        hash before the write; an unchanged password is written as is.
        Updates only apply when the stored version still matches the one
        the user was loaded with.

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID and version set

        Raises:
            ConflictError: If the stored user changed since it was loaded
            BadRequestError: If a new user's email is already registered
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            user_dict = self._user_to_dict(user)
            if user.password_modified:
                user_dict[UserFields.PASSWORD] = hash_password(user.password)
            now = datetime.now(timezone.utc)
            user_dict[UserFields.UPDATED_AT] = now

            if user.id:
                # Update existing user, guarded by the version it was read at
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, ValueError, TypeError):
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id, **version_guard(UserFields.VERSION, user.version)},
                    {
                        "$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID},
                        "$inc": {UserFields.VERSION: 1},
                    }
                )

                if update_result.matched_count == 0:
                    exists = await self.user_collection.count_documents(
                        {UserFields.MONGO_ID: object_id}, limit=1
                    )
                    if not exists:
                        raise ValueError(f"User with ID {user.id} not found")
                    raise ConflictError("User was modified concurrently, please retry")

                user.version += 1
            else:
                # Create new user
                user_dict[UserFields.VERSION] = 0
                user_dict[UserFields.CREATED_AT] = now
                try:
                    result = await self.user_collection.insert_one(user_dict)
                except DuplicateKeyError:
                    raise BadRequestError("Email already taken")
                user.id = str(result.inserted_id)
                user.version = 0
                user.created_at = now

            user.updated_at = now
            if user.password_modified:
                user.mark_password_hashed(user_dict[UserFields.PASSWORD])
            return user
        except (ApiError, ValueError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def debit_wallet(self, user: User, amount: float) -> bool:
        """
        Atomically subtract ``amount`` from the stored wallet

        The write only matches while the stored balance still covers the
        amount, so concurrent checkouts can never overdraw the wallet. It does
        not check the user's version: an unrelated change such as a new
        address must not block the payment.

        Returns:
            True if the wallet was debited, False if the balance is too low
        """
        document = await self._increment_wallet(
            user,
            -amount,
            {UserFields.WALLET_MONEY: {"$gte": amount}},
        )
        if document is None:
            return False
        self._refresh_wallet(user, document)
        return True

    async def credit_wallet(self, user: User, amount: float) -> None:
        """
        Atomically add ``amount`` to the stored wallet (checkout refunds)

        Raises:
            ValueError: If the user no longer exists
        """
        document = await self._increment_wallet(user, amount, {})
        if document is None:
            raise ValueError(f"User with ID {user.id} not found")
        self._refresh_wallet(user, document)

    async def _increment_wallet(self, user: User, amount: float, condition: dict) -> Optional[dict]:
        try:
            object_id = ObjectId(user.id)
        except (InvalidId, ValueError, TypeError):
            raise ValueError(f"Invalid user ID format: {user.id}")

        try:
            return await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id, **condition},
                {
                    "$inc": {UserFields.WALLET_MONEY: amount, UserFields.VERSION: 1},
                    "$set": {UserFields.UPDATED_AT: datetime.now(timezone.utc)},
                },
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating wallet: {str(e)}")

    def _refresh_wallet(self, user: User, document: dict) -> None:
        user.wallet_money = document.get(UserFields.WALLET_MONEY, 0)
        user.version = document.get(UserFields.VERSION, user.version)
        user.updated_at = document.get(UserFields.UPDATED_AT, user.updated_at)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            address=document.get(UserFields.ADDRESS, self.default_address),
            wallet_money=document.get(UserFields.WALLET_MONEY, 0),
            version=document.get(UserFields.VERSION, 0),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without bookkeeping fields)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.password,
            UserFields.WALLET_MONEY: user.wallet_money,
            UserFields.ADDRESS: user.address,
        }
