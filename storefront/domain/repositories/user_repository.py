from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (create or update).
        
        A password marked as modified is hashed before it is written.
        """
        pass
    
    @abstractmethod
    async def debit_wallet(self, user: User, amount: float) -> bool:
        """
        Subtract ``amount`` from the stored wallet if the stored balance covers it.
        
        Returns False when the balance is too low. On success the user's
        wallet_money and version are refreshed from the stored document.
        """
        pass
    
    @abstractmethod
    async def credit_wallet(self, user: User, amount: float) -> None:
        """Add ``amount`` back to the stored wallet and refresh the user from it."""
        pass
