# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.errors import UnauthorizedError
from ....core.security import create_jwt_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse, TokenResponse
from ...dto.user_dto import UserResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            AuthResponse with the user and an access token
            
        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not user.is_password_match(request.password):
            raise UnauthorizedError("Incorrect email or password")
        
        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })
        
        return AuthResponse(
            user=UserResponse.from_user(user),
            tokens=TokenResponse(access_token=token),
        )
