from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse, AuthResponse
from .user_dto import UserResponse, AddressUpdateRequest, AddressResponse
from .product_dto import ProductResponse
from .cart_dto import (
    CartProductRequest,
    CartProductUpdateRequest,
    CartItemResponse,
    CartResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "AuthResponse",
    "UserResponse",
    "AddressUpdateRequest",
    "AddressResponse",
    "ProductResponse",
    "CartProductRequest",
    "CartProductUpdateRequest",
    "CartItemResponse",
    "CartResponse",
]
