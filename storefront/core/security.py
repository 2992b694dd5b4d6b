# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """bcrypt hash of ``plain_password``, salted with BCRYPT_ROUNDS rounds."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a login attempt against a stored hash.

    A missing or malformed stored hash counts as a mismatch.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Sign an access token for ``payload``

    Args:
        payload: Claims to carry; login and register put the user id in ``sub``

    Returns:
        Token valid for ACCESS_TOKEN_EXPIRE_MINUTES
    """
    settings = get_settings()
    now = int(time.time())
    claims = {**payload, "iat": now, "exp": now + settings.access_token_expire_minutes * 60}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify an access token's signature and expiry and return its claims

    Raises:
        ValueError: For any token PyJWT rejects
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {e}")
