"""
Cart service
------------

Role:
- Owns every cart rule: product existence, one item per product, removal of
  items whose quantity drops to zero, and checkout against the wallet.
- Reads users, products and carts through the repository interfaces and
  returns domain Cart objects; the API layer turns them into DTOs.

Concurrency:
- No in-process locking. Carts are saved with a version check, so a request
  that lost a read-modify-write race fails with ConflictError instead of
  overwriting the other request's changes.
- Wallet changes are single conditional $inc writes, never a
  read-modify-write of the whole user.
"""
# Standard library imports
import logging

# Local application imports
from ...core.errors import BadRequestError, InternalError, NotFoundError
from ...domain.models.cart import Cart
from ...domain.models.product import normalize_product_id
from ...domain.models.user import User
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CartService:
    """Cart lifecycle operations for an authenticated user"""

    def __init__(
        self,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
        user_repository: UserRepository,
        default_address: str,
    ) -> None:
        self.cart_repository = cart_repository
        self.product_repository = product_repository
        self.user_repository = user_repository
        self.default_address = default_address

    async def get_cart_by_user(self, user: User) -> Cart:
        """
        Fetch the user's cart

        Raises:
            NotFoundError: If the user has no cart
        """
        cart = await self.cart_repository.find_by_email(user.email)
        if cart is None:
            raise NotFoundError("User does not have a cart")
        return cart

    async def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Add a product to the user's cart, creating the cart on first use

        Args:
            user: Authenticated user
            product_id: ID of the catalogue product
            quantity: Quantity to add

        Returns:
            The updated cart

        Raises:
            BadRequestError: If the product does not exist or is already in the cart
            InternalError: If the cart could not be created
        """
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise BadRequestError("Product doesn't exist in database")

        cart = await self.cart_repository.find_by_email(user.email)
        if cart is None:
            logger.info(f"Creating new cart for user {user.email}")
            cart = await self.cart_repository.create(user.email)
            if cart is None:
                raise InternalError("Internal Server Error")

        if cart.contains(product.id):
            raise BadRequestError(
                "Product already in cart. Use the cart sidebar to update or remove product from cart"
            )

        cart.add_item(product, quantity)
        return await self.cart_repository.save(cart)

    async def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Change the quantity of a product already in the cart

        A quantity of zero or less removes the product instead.

        Raises:
            BadRequestError: If the product does not exist, the user has no
                cart, or the product is not in the cart
        """
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise BadRequestError("Product doesn't exist in database")

        cart = await self.cart_repository.find_by_email(user.email)
        if cart is None:
            raise BadRequestError("User does not have a cart. Use POST to create cart and add a product")

        if not cart.contains(product.id):
            raise BadRequestError("Product not in cart")

        cart.update_quantity(product.id, quantity)
        return await self.cart_repository.save(cart)

    async def delete_product_from_cart(self, user: User, product_id: str) -> Cart:
        """
        Remove a product from the cart

        Raises:
            BadRequestError: If the user has no cart or the product is not in it
        """
        cart = await self.cart_repository.find_by_email(user.email)
        if cart is None:
            raise BadRequestError("User does not have a cart")

        if cart.remove_item(normalize_product_id(product_id)) == 0:
            raise BadRequestError("Product not in cart")

        return await self.cart_repository.save(cart)

    async def checkout(self, user: User) -> Cart:
        """
        Pay for the cart from the user's wallet and empty it

        Every precondition is checked before anything is written. The wallet
        is then debited with a balance-guarded write and the emptied cart is
        saved under its version check. If the cart save fails the debit is
        refunded, so a failed checkout leaves both the wallet and the cart
        as they were.

        Returns:
            The emptied cart

        Raises:
            NotFoundError: If the user has no cart
            BadRequestError: If the cart is empty, the address is not set or
                the wallet cannot cover the total
            ConflictError: If the cart changed since it was read
        """
        cart = await self.get_cart_by_user(user)

        if cart.is_empty:
            raise BadRequestError("Cart is Empty")

        if not user.has_set_non_default_address(self.default_address):
            raise BadRequestError("Address not set")

        total_cost = cart.total_cost()
        if total_cost > user.wallet_money:
            raise BadRequestError("Insufficient Balance")

        if not await self.user_repository.debit_wallet(user, total_cost):
            # Stored balance dropped below the total since the user was loaded
            raise BadRequestError("Insufficient Balance")

        items = list(cart.cart_items)
        cart.clear()
        try:
            await self.cart_repository.save(cart)
        except Exception:
            cart.cart_items = items
            await self._refund(user, total_cost)
            raise

        logger.info(f"Checkout completed for {user.email}: charged {total_cost}, balance {user.wallet_money}")
        return cart

    async def _refund(self, user: User, amount: float) -> None:
        try:
            await self.user_repository.credit_wallet(user, amount)
        except Exception as e:
            # The cart error is the one the caller sees; the lost refund needs manual repair
            logger.error(f"Refund of {amount} to {user.email} failed after checkout error: {e}", exc_info=True)
            return
        logger.warning(f"Checkout for {user.email} failed after debit, refunded {amount}")
