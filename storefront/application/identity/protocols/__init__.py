from .password_service import PasswordServiceProtocol
from .token_service import TokenClaims, TokenPair, TokenServiceProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "TokenClaims",
    "TokenPair",
    "TokenServiceProtocol",
    "UserRepositoryProtocol",
]
