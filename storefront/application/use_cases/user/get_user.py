# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.errors import ForbiddenError, NotFoundError


class GetUserUseCase:
    """Use case for reading a user record (owner only)"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, current_user: User) -> User:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user to read
            current_user: Authenticated user making the request
            
        Returns:
            User domain model
            
        Raises:
            ForbiddenError: If the ID belongs to someone else
            NotFoundError: If no user has this ID
        """
        if user_id != current_user.id:
            raise ForbiddenError("User not authorized to access this resource")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
