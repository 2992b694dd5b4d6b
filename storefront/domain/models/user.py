# Standard library imports
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Local application imports
from ...core.errors import ValidationError
from ...core.security import verify_password


EMAIL_PATTERN = re.compile(
    r'^(([^<>()[\]\\.,;:\s@"]+(\.[^<>()[\]\\.,;:\s@"]+)*)|(".+"))@'
    r'((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)

MIN_PASSWORD_LENGTH = 8


def validate_email(email: str) -> None:
    """Raise ValidationError unless the value looks like local@domain."""
    if not email or EMAIL_PATTERN.match(email.lower()) is None:
        raise ValidationError("Invalid Email")


def validate_password(password: str) -> None:
    """Raise ValidationError for plaintext passwords that are too weak."""
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("Password must contain at least 8 characters")
    if not re.search(r"\d", password) or not re.search(r"[a-zA-Z]", password):
        raise ValidationError("Password must contain at least one letter and one number")


@dataclass
class User:
    """
    Domain model for a shop account.

    ``password`` holds the bcrypt hash once the user has been stored. While
    ``password_modified`` is set it holds a validated plaintext that the
    repository hashes on the next save.
    """
    id: Optional[str]
    name: str
    email: str
    password: str
    address: str
    wallet_money: float = 500.0
    version: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    password_modified: bool = field(default=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Business validations"""
        self.name = (self.name or "").strip()
        self.email = (self.email or "").strip()
        if not self.name:
            raise ValidationError("Name is required")
        validate_email(self.email)
        if self.wallet_money is None or self.wallet_money < 0:
            raise ValidationError("Wallet money cannot be negative")
        if self.password_modified:
            validate_password(self.password)

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password: str,
        default_address: str,
        wallet_money: float = 500.0,
    ) -> "User":
        """Build a new, unsaved user from a plaintext password."""
        return cls(
            id=None,
            name=name,
            email=email,
            password=password,
            address=default_address,
            wallet_money=wallet_money,
            password_modified=True,
        )

    def set_password(self, plain_password: str) -> None:
        validate_password(plain_password)
        self.password = plain_password
        self.password_modified = True

    def mark_password_hashed(self, hashed_password: str) -> None:
        self.password = hashed_password
        self.password_modified = False

    def is_password_match(self, candidate_password: str) -> bool:
        """A mismatch is a False result, never an error."""
        if self.password_modified:
            return False
        return verify_password(candidate_password, self.password)

    def has_set_non_default_address(self, default_address: str) -> bool:
        return self.address != default_address
