from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.product.list_products import ListProductsUseCase
from ...application.use_cases.product.get_product import GetProductUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListProductsUseCase,
            lambda: ListProductsUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            GetProductUseCase,
            lambda: GetProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
