from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.cart_repository import CartRepository
from ...application.services.cart_service import CartService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CartProvider:
    """Cart service provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the cart service as a singleton.
        It holds no per-request state, only repositories and the default address.
        """
        container.register_singleton(
            CartService,
            CartService(
                cart_repository=container.get(CartRepository),
                product_repository=container.get(ProductRepository),
                user_repository=container.get(UserRepository),
                default_address=get_settings().default_address,
            )
        )
