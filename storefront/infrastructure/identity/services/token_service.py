"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from storefront.application.identity.protocols import TokenClaims, TokenPair
from storefront.config import get_settings

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
REFRESH_TOKEN_SECRET_KEY = settings.REFRESH_TOKEN_SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS


def create_access_token(subject_id: str, role: str) -> str:
    """Create an access token for a user."""
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": subject_id, "role": role, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_refresh_token(subject_id: str, role: str) -> str:
    """Create a refresh token for a user."""
    expire = datetime.now(UTC) + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode = {"sub": subject_id, "role": role, "exp": expire, "type": "refresh"}
    return jwt.encode(to_encode, REFRESH_TOKEN_SECRET_KEY, algorithm=ALGORITHM)


def _claims(payload: dict[str, object], expected_type: str) -> TokenClaims | None:
    if payload.get("type") != expected_type:
        return None
    subject = payload.get("sub")
    role = payload.get("role")
    if not isinstance(subject, str) or not isinstance(role, str):
        return None
    return TokenClaims(subject=subject, role=role)


def verify_access_token(token: str) -> TokenClaims | None:
    """Verify an access token and return its claims if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None
    # Refresh tokens are only accepted at the refresh endpoint
    return _claims(payload, "access")


def verify_refresh_token(token: str) -> TokenClaims | None:
    """Verify a refresh token and return its claims if valid."""
    try:
        payload = jwt.decode(token, REFRESH_TOKEN_SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None
    return _claims(payload, "refresh")


def create_token_pair(subject_id: str, role: str) -> TokenPair:
    """Create a token pair (access + refresh) for a user."""
    return TokenPair(
        access_token=create_access_token(subject_id, role),
        refresh_token=create_refresh_token(subject_id, role),
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
