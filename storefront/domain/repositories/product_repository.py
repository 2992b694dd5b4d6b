from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - read access to the product catalogue"""
    
    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""
        pass
    
    @abstractmethod
    async def list_all(self) -> List[Product]:
        """List every product in the catalogue"""
        pass
