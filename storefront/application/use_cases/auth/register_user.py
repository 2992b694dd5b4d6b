# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....core.errors import BadRequestError
from ....core.security import create_jwt_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse, TokenResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        default_address: str,
        default_wallet_money: float = 500.0,
    ) -> None:
        self.user_repository = user_repository
        self.default_address = default_address
        self.default_wallet_money = default_wallet_money
    
    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details
            
        Returns:
            AuthResponse with the created user and an access token
            
        Raises:
            BadRequestError: If a user with this email already exists
            ValidationError: If the password is too weak
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise BadRequestError("Email already taken")
        
        # Plaintext is validated here and hashed by the repository on save
        new_user = User.create(
            name=request.name,
            email=request.email,
            password=request.password,
            default_address=self.default_address,
            wallet_money=self.default_wallet_money,
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id} ({saved_user.email})")
        
        token = create_jwt_token({
            "sub": saved_user.id or "",
            UserFields.EMAIL: saved_user.email,
        })
        
        return AuthResponse(
            user=UserResponse.from_user(saved_user),
            tokens=TokenResponse(access_token=token),
        )
