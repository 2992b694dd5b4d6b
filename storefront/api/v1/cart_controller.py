# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.cart_dto import CartProductRequest, CartProductUpdateRequest, CartResponse
from ...application.services.cart_service import CartService
from ...domain.models.user import User
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart(
    current_user: User = Depends(get_current_user),
) -> CartResponse:
    """
    Get the current user's cart
    
    Args:
        current_user: Current authenticated user (from dependency)
    """
    cart_service = get_container().get(CartService)
    cart = await cart_service.get_cart_by_user(current_user)
    return CartResponse.from_cart(cart)


@router.post("", response_model=CartResponse)
async def add_product_to_cart(
    request: CartProductRequest,
    current_user: User = Depends(get_current_user),
) -> CartResponse:
    """
    Add a product to the cart, creating the cart on first use
    
    Args:
        request: Product and quantity to add
        current_user: Current authenticated user (from dependency)
    """
    cart_service = get_container().get(CartService)
    cart = await cart_service.add_product_to_cart(
        current_user, request.product_id, request.quantity
    )
    return CartResponse.from_cart(cart)


@router.put("", response_model=CartResponse)
async def update_product_in_cart(
    request: CartProductUpdateRequest,
    current_user: User = Depends(get_current_user),
) -> CartResponse:
    """
    Change the quantity of a product in the cart (0 or less removes it)
    
    Args:
        request: Product and new quantity
        current_user: Current authenticated user (from dependency)
    """
    cart_service = get_container().get(CartService)
    cart = await cart_service.update_product_in_cart(
        current_user, request.product_id, request.quantity
    )
    return CartResponse.from_cart(cart)


@router.delete("/{product_id}", response_model=CartResponse)
async def delete_product_from_cart(
    product_id: str,
    current_user: User = Depends(get_current_user),
) -> CartResponse:
    """
    Remove a product from the cart
    
    Args:
        product_id: ID of the product to remove
        current_user: Current authenticated user (from dependency)
    """
    cart_service = get_container().get(CartService)
    cart = await cart_service.delete_product_from_cart(current_user, product_id)
    return CartResponse.from_cart(cart)


@router.put("/checkout", status_code=status.HTTP_204_NO_CONTENT)
async def checkout(
    current_user: User = Depends(get_current_user),
) -> Response:
    """
    Pay for the cart from the wallet and empty it
    
    Args:
        current_user: Current authenticated user (from dependency)
    """
    cart_service = get_container().get(CartService)
    await cart_service.checkout(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
