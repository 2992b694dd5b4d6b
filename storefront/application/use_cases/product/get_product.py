# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....core.errors import NotFoundError
from ...dto.product_dto import ProductResponse


class GetProductUseCase:
    """Use case for getting a product by ID"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: str) -> ProductResponse:
        """
        Get a product by ID
        
        Raises:
            NotFoundError: If the product does not exist
        """
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return ProductResponse.from_product(product)
