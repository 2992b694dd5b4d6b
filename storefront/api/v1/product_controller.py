# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.product_dto import ProductResponse
from ...application.use_cases.product.list_products import ListProductsUseCase
from ...application.use_cases.product.get_product import GetProductUseCase
from ...di.container import get_container


router = APIRouter(tags=["products"])


@router.get("", response_model=List[ProductResponse])
async def list_products() -> List[ProductResponse]:
    """List the product catalogue (public)"""
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)
    return await list_products_use_case.execute()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    """
    Get a product by ID (public)
    
    Args:
        product_id: ID of the product
    """
    container = get_container()
    get_product_use_case = container.get(GetProductUseCase)
    return await get_product_use_case.execute(product_id)
