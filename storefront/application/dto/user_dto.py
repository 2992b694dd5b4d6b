from pydantic import BaseModel, EmailStr, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr
    wallet_money: float
    address: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            wallet_money=user.wallet_money,
            address=user.address,
        )


class AddressUpdateRequest(BaseModel):
    """DTO for setting a shipping address"""
    address: str = Field(min_length=20, max_length=500)


class AddressResponse(BaseModel):
    address: str
