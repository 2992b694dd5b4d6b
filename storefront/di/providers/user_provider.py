from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.set_address import SetAddressUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            SetAddressUseCase,
            lambda: SetAddressUseCase(
                user_repository=container.get(UserRepository)
            )
        )
