"""Service for user accounts: registration, login and profile management."""

from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from storefront.application.common.pagination import PaginationRequest
from storefront.application.common.patch import is_set
from storefront.application.identity.dtos import (
    CreateUserRequest,
    DeleteUserRequest,
    LoginUserRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserPaginationResponse,
    UserResponse,
)
from storefront.application.identity.protocols import (
    PasswordServiceProtocol,
    TokenClaims,
    TokenPair,
    TokenServiceProtocol,
    UserRepositoryProtocol,
)
from storefront.domain.common.exceptions import (
    DomainError,
    ExternalServiceError,
    InvalidIDFormatError,
    StoreError,
)
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import Role, User, is_valid_email
from storefront.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidLoginCredentialError,
    InvalidNameError,
    InvalidPasswordError,
    InvalidTokenError,
    PasswordSameError,
    TokenGenerationFailedError,
    UserNotFoundError,
)

MIN_NAME_LENGTH = 5
MIN_PASSWORD_LENGTH = 8

_Saved = TypeVar("_Saved", User, User | None)


class UserService:
    """
    Validates user input, enforces account invariants and drives persistence.

    Every failure is logged exactly once, here, before it is re-raised to
    the transport layer.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        logger: Any = None,
    ) -> None:
        """Initialize service with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.logger = logger or structlog.get_logger(__name__)

    def register(self, request: RegisterUserRequest) -> UserResponse:
        """
        Register a self-service account. The role is always ``user``.

        Raises:
            InvalidNameError, InvalidEmailError, InvalidPasswordError
            EmailAlreadyExistsError: If an active user already has this email
            StoreError: If the store fails
        """
        try:
            user = self._create_account(
                request.name, request.email, request.password, role=Role.USER
            )
        except DomainError as e:
            self._log_failure("user_registration_failed", e, email=request.email)
            raise

        self.logger.info("user_registered", user_id=str(user.id), email=user.email)
        return UserResponse.from_entity(user)

    def create_user(self, request: CreateUserRequest) -> UserResponse:
        """
        Create an account on behalf of an administrator. The role is always ``admin``.

        Validation is identical to :meth:`register`.
        """
        try:
            user = self._create_account(
                request.name,
                request.email,
                request.password,
                role=Role.ADMIN,
                phone_number=request.phone_number,
                address=request.address,
            )
        except DomainError as e:
            self._log_failure("user_creation_failed", e, email=request.email)
            raise

        self.logger.info("user_created", user_id=str(user.id), email=user.email)
        return UserResponse.from_entity(user)

    def login(self, request: LoginUserRequest) -> TokenPair:
        """
        Authenticate with email and password and issue a token pair.

        Raises:
            InvalidLoginCredentialError: For an unknown email or a wrong password
            TokenGenerationFailedError: If the token issuer fails
        """
        try:
            user = self.user_repository.find_by_email(request.email)

            if user is None:
                # Keep the response time independent of whether the email exists
                self.password_service.verify_password(
                    request.password, self.password_service.get_dummy_hash()
                )
                self.logger.warning("login_failed", reason="email_not_found")
                raise InvalidLoginCredentialError

            if not self.password_service.verify_password(request.password, user.hashed_password):
                self.logger.warning(
                    "login_failed", reason="password_mismatch", user_id=str(user.id)
                )
                raise InvalidLoginCredentialError

            token_pair = self._issue_tokens(user)
        except InvalidLoginCredentialError:
            raise
        except DomainError as e:
            self._log_failure("login_failed", e, email=request.email)
            raise

        self.logger.info("user_authenticated", user_id=str(user.id))
        return token_pair

    def refresh(self, refresh_token: str) -> TokenPair:
        """
        Exchange a valid refresh token for a new token pair.

        Raises:
            InvalidTokenError: If the token is invalid or its user no longer exists
        """
        try:
            claims = self.token_service.verify_refresh_token(refresh_token)
            if claims is None:
                raise InvalidTokenError
            user = self.get_authenticated_user(claims)
            token_pair = self._issue_tokens(user)
        except DomainError as e:
            self._log_failure("token_refresh_failed", e)
            raise

        self.logger.info("access_token_refreshed", user_id=str(user.id))
        return token_pair

    def get_authenticated_user(self, claims: TokenClaims) -> User:
        """Resolve verified token claims to an active user."""
        try:
            user_id = UserId.parse(claims.subject)
        except InvalidIDFormatError:
            raise InvalidTokenError from None

        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise InvalidTokenError
        return user

    def get_user_by_id(self, user_id: UserId) -> UserResponse:
        try:
            user = self._get_existing(user_id)
        except DomainError as e:
            self._log_failure("user_lookup_failed", e, user_id=str(user_id))
            raise
        return UserResponse.from_entity(user)

    def list_users(self, search: str = "") -> list[UserResponse]:
        """List every active user, optionally filtered by name or email."""
        try:
            users = self.user_repository.list_all(search)
        except DomainError as e:
            self._log_failure("user_list_failed", e, search=search)
            raise
        return [UserResponse.from_entity(user) for user in users]

    def list_users_paginated(self, request: PaginationRequest) -> UserPaginationResponse:
        try:
            result = self.user_repository.list_paginated(request)
        except DomainError as e:
            self._log_failure("user_list_failed", e, page=request.page)
            raise

        self.logger.info("users_listed", page=result.page, count=result.count)
        return UserPaginationResponse(
            data=[UserResponse.from_entity(user) for user in result.items],
            page=result.page,
            per_page=result.per_page,
            max_page=result.max_page,
            count=result.count,
        )

    def update_user(self, request: UpdateUserRequest) -> UserResponse:
        """
        Apply a partial update. Only fields present on the request are changed.

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidNameError, InvalidEmailError, PasswordSameError
            EmailAlreadyExistsError: If another active user has the new email
        """
        try:
            user = self._get_existing(request.id)

            if is_set(request.name):
                self._check_name(request.name)
                user.rename(request.name)

            if is_set(request.email):
                self._check_email_format(request.email)
                existing = self.user_repository.find_by_email(request.email)
                if existing is not None and existing.id != user.id:
                    raise EmailAlreadyExistsError(request.email)
                user.change_email(request.email)

            if is_set(request.password):
                if self.password_service.verify_password(request.password, user.hashed_password):
                    raise PasswordSameError
                user.change_password(self.password_service.hash_password(request.password))

            if is_set(request.phone_number):
                user.change_phone_number(request.phone_number)

            if is_set(request.address):
                user.change_address(request.address)

            updated = self._save(self.user_repository.update, user)
            if updated is None:
                # Deleted between the lookup and the write
                raise UserNotFoundError(request.id)
            user = updated
        except DomainError as e:
            self._log_failure("user_update_failed", e, user_id=str(request.id))
            raise

        self.logger.info("user_updated", user_id=str(user.id))
        return UserResponse.from_entity(user)

    def delete_user(self, request: DeleteUserRequest) -> UserResponse:
        """Soft-delete a user and return the data it had."""
        try:
            user = self._get_existing(request.id)
            self.user_repository.soft_delete(user.id)
        except DomainError as e:
            self._log_failure("user_deletion_failed", e, user_id=str(request.id))
            raise

        self.logger.info("user_deleted", user_id=str(user.id))
        return UserResponse.from_entity(user)

    def _create_account(
        self,
        name: str,
        email: str,
        password: str,
        *,
        role: Role,
        phone_number: str = "",
        address: str = "",
    ) -> User:
        self._check_name(name)
        self._check_email_format(email)
        if self.user_repository.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)
        self._check_password(password)

        user = User.create(
            name=name,
            email=email,
            hashed_password=self.password_service.hash_password(password),
            role=role,
            phone_number=phone_number,
            address=address,
        )
        return self._save(self.user_repository.create, user)

    def _get_existing(self, user_id: UserId) -> User:
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _save(self, write: Callable[[User], _Saved], user: User) -> _Saved:
        # The unique index is authoritative; a lost race still surfaces as a conflict
        try:
            return write(user)
        except StoreError as e:
            if e.unique_violation:
                raise EmailAlreadyExistsError(user.email) from e
            raise

    def _issue_tokens(self, user: User) -> TokenPair:
        try:
            return self.token_service.generate(str(user.id), str(user.role))
        except ExternalServiceError as e:
            raise TokenGenerationFailedError from e

    def _log_failure(self, event: str, error: DomainError, **context: object) -> None:
        if isinstance(error, StoreError | ExternalServiceError):
            self.logger.error(event, code=error.code, error=str(error), **context)
        else:
            self.logger.warning(event, code=error.code, error=error.message, **context)

    @staticmethod
    def _check_name(name: str) -> None:
        if len(name) < MIN_NAME_LENGTH:
            raise InvalidNameError(MIN_NAME_LENGTH)

    @staticmethod
    def _check_email_format(email: str) -> None:
        if not is_valid_email(email):
            raise InvalidEmailError(email)

    @staticmethod
    def _check_password(password: str) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidPasswordError(MIN_PASSWORD_LENGTH)
