from abc import ABC, abstractmethod
from typing import Optional
from ..models.cart import Cart


class CartRepository(ABC):
    """Repository interface - defines contract for cart data access"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Cart]:
        """Find the cart owned by the user with this email"""
        pass
    
    @abstractmethod
    async def create(self, email: str) -> Optional[Cart]:
        """Create an empty cart for this email, or return the existing one"""
        pass
    
    @abstractmethod
    async def save(self, cart: Cart) -> Cart:
        """
        Save an existing cart.
        
        Raises:
            ConflictError: If the stored cart changed since it was loaded
        """
        pass
