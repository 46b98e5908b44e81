"""Domain layer errors.

Every business error carries a stable machine-readable ``code`` next to its
human-readable message, the interface layer forwards both to the client.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist or is soft-deleted."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PermissionDeniedError(DomainError):
    """Raised when a user attempts to mutate content they don't own."""

    code = "permission_denied"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to modify {resource} {resource_id}"
        )


class InvalidRelationError(DomainError):
    """Raised when a child references a parent outside its ownership chain."""

    code = "invalid_relation"


class ConflictError(DomainError):
    """Raised on a uniqueness violation."""

    code = "conflict"


class BadRequestError(DomainError):
    """Raised on malformed self-referential input."""

    code = "bad_request"


class InvalidStatusTransitionError(DomainError):
    """Raised when a media upload leaves a terminal status."""

    code = "invalid_status_transition"

    def __init__(self, media_id: str, current: str, requested: str):
        self.media_id = media_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Media {media_id} cannot move from {current} to {requested}"
        )
