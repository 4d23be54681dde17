from typing import Protocol

from pydantic import BaseModel


class TokenPair(BaseModel):
    """Access and refresh tokens issued at login."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"  # noqa: S105
    expires_in: int


class TokenClaims(BaseModel):
    """Verified claims carried by a token."""

    subject: str
    role: str


class TokenServiceProtocol(Protocol):
    def generate(self, subject_id: str, role: str) -> TokenPair: ...

    def verify_access_token(self, token: str) -> TokenClaims | None: ...

    def verify_refresh_token(self, token: str) -> TokenClaims | None: ...
