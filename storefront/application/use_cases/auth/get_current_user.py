# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.errors import UnauthorizedError
from ....core.security import decode_jwt_token


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> User:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            User domain model, as later use cases need to mutate and save it
            
        Raises:
            UnauthorizedError: If token is invalid or user not found
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError:
            raise UnauthorizedError("Please authenticate")
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise UnauthorizedError("Please authenticate")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UnauthorizedError("Please authenticate")
        
        return user
