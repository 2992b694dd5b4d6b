from pydantic import BaseModel

from ...domain.models.product import Product


class ProductResponse(BaseModel):
    """DTO for product response"""
    id: str
    name: str
    category: str
    cost: float
    rating: float
    image: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id or "",
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )
