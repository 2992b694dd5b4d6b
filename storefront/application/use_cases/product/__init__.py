from .list_products import ListProductsUseCase
from .get_product import GetProductUseCase

__all__ = [
    "ListProductsUseCase",
    "GetProductUseCase",
]
