"""
Domain layer exceptions.

Every error the core raises belongs to one of a small number of kinds.
Transports (REST, GraphQL) only ever look at these kinds, never at the
shape of the underlying store or library errors.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    ``code`` is a stable, transport-neutral identifier of the error kind.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when input has a bad format, length or range.

    Example: a name shorter than five characters, a non-positive price.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be broken."""

    code = "CONFLICT"

    def __init__(self, message: str, field: str, value: object) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Soft-deleted entities are reported as not found.
    """

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class AuthError(DomainError):
    """Raised on bad credentials, invalid tokens or insufficient role."""

    code = "AUTH_ERROR"

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)


class StoreError(DomainError):
    """
    Raised when the persistence layer fails.

    ``unique_violation`` is set when the store rejected a write because of a
    unique index, so services can report it as a conflict.
    """

    code = "STORE_ERROR"

    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        *,
        unique_violation: bool = False,
    ) -> None:
        super().__init__(f"Failed to {operation}", {"operation": operation})
        self.operation = operation
        self.cause = cause
        self.unique_violation = unique_violation


class ExternalServiceError(DomainError):
    """Raised when a collaborator outside the store fails."""

    code = "EXTERNAL_SERVICE_ERROR"


class InvalidIDFormatError(ValidationError):
    """Raised when an identifier is not a valid UUID."""

    code = "INVALID_ID_FORMAT"

    def __init__(self, raw: object) -> None:
        super().__init__("Invalid id format, expected a UUID", field="id", value=raw)
