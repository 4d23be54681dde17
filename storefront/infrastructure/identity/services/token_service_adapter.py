import jwt

from storefront.application.identity.protocols import TokenClaims, TokenPair
from storefront.domain.common.exceptions import ExternalServiceError
from storefront.infrastructure.identity.services import token_service


class TokenServiceAdapter:
    """Adapter wrapping token service functions for DI."""

    def generate(self, subject_id: str, role: str) -> TokenPair:
        try:
            return token_service.create_token_pair(subject_id, role)
        except jwt.PyJWTError as e:
            raise ExternalServiceError(f"Token issuer failed: {e}") from e

    def verify_access_token(self, token: str) -> TokenClaims | None:
        return token_service.verify_access_token(token)

    def verify_refresh_token(self, token: str) -> TokenClaims | None:
        return token_service.verify_refresh_token(token)
