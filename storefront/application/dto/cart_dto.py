from typing import List

from pydantic import BaseModel, Field

from ...domain.models.cart import Cart
from .product_dto import ProductResponse


class CartProductRequest(BaseModel):
    """DTO for adding a product to the cart"""
    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class CartProductUpdateRequest(BaseModel):
    """DTO for changing a cart item's quantity (0 or less removes it)"""
    product_id: str = Field(min_length=1)
    quantity: int


class CartItemResponse(BaseModel):
    product: ProductResponse
    quantity: int


class CartResponse(BaseModel):
    """DTO for cart response"""
    id: str
    email: str
    cart_items: List[CartItemResponse]
    payment_option: str
    total_cost: float

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartResponse":
        return cls(
            id=cart.id or "",
            email=cart.email,
            cart_items=[
                CartItemResponse(
                    product=ProductResponse.from_product(item.product),
                    quantity=item.quantity,
                )
                for item in cart.cart_items
            ],
            payment_option=cart.payment_option,
            total_cost=cart.total_cost(),
        )
