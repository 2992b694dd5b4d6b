from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserUseCase,
    SetAddressUseCase,
)
from .product import (
    ListProductsUseCase,
    GetProductUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "SetAddressUseCase",
    "ListProductsUseCase",
    "GetProductUseCase",
]
