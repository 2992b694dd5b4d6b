from pydantic import BaseModel, EmailStr, Field

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"


class AuthResponse(BaseModel):
    """DTO returned by register and login"""
    user: UserResponse
    tokens: TokenResponse
