from .get_user import GetUserUseCase
from .set_address import SetAddressUseCase

__all__ = [
    "GetUserUseCase",
    "SetAddressUseCase",
]
