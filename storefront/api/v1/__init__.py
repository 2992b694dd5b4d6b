from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .product_controller import router as product_router
from .cart_controller import router as cart_router
from .health_controller import router as health_router


__all__ = ["auth_router", "user_router", "product_router", "cart_router", "health_router"]
