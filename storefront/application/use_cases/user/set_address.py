# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.errors import ForbiddenError, NotFoundError
from ....domain.models.user import User

logger = logging.getLogger(__name__)


class SetAddressUseCase:
    """Use case for setting a user's shipping address (owner only)"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, address: str, current_user: User) -> str:
        """
        Replace the user's address
        
        Returns:
            The stored address
            
        Raises:
            ForbiddenError: If the ID belongs to someone else
            NotFoundError: If no user has this ID
        """
        if user_id != current_user.id:
            raise ForbiddenError("User not authorized to access this resource")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        
        user.address = address
        saved_user = await self.user_repository.save(user)
        logger.info(f"Address updated for user {saved_user.id}")
        return saved_user.address
