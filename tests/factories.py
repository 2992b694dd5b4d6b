"""
Builders for domain objects used across the test suite.
"""
from storefront.domain.models.user import User
from storefront.domain.models.product import Product
from storefront.domain.models.cart import Cart

DEFAULT_ADDRESS = "ADDRESS_NOT_SET"


def make_user(
    user_id: str = "64b000000000000000000001",
    email: str = "buyer@example.com",
    wallet_money: float = 500.0,
    address: str = DEFAULT_ADDRESS,
    password: str = "$2b$04$placeholderhashplaceholderhashplaceholderhash",
) -> User:
    return User(
        id=user_id,
        name="Buyer",
        email=email,
        password=password,
        address=address,
        wallet_money=wallet_money,
    )


def make_product(
    product_id: str = "64a000000000000000000001",
    cost: float = 100.0,
    name: str = "Desk Lamp",
) -> Product:
    return Product(id=product_id, name=name, cost=cost, category="Home", rating=4, image="lamp.png")


def make_cart(email: str = "buyer@example.com", items=()) -> Cart:
    cart = Cart(id="64c000000000000000000001", email=email)
    for product, quantity in items:
        cart.add_item(product, quantity)
    return cart
