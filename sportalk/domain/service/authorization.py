"""Ownership checks shared by every mutating operation."""

from uuid import UUID

import logfire

from sportalk.domain.error import PermissionDeniedError


def is_owner(principal_id: UUID, owner_id: UUID) -> bool:
    """Whether the principal owns a resource owned by ``owner_id``."""
    return principal_id == owner_id


def check_ownership(
    principal_id: UUID, owner_id: UUID, resource: str, resource_id: UUID
) -> None:
    """Deny the principal unless it owns the resource.

    Args:
        principal_id: The authenticated user making the request
        owner_id: The resource's author (for media, the parent post's author)
        resource: Resource kind, used in the error message
        resource_id: Resource ID, used in the error message

    Raises:
        PermissionDeniedError: If the principal is not the owner
    """
    if not is_owner(principal_id, owner_id):
        logfire.warn(
            "Ownership check failed",
            resource=resource,
            resource_id=str(resource_id),
            principal_id=str(principal_id),
        )
        raise PermissionDeniedError(resource, str(resource_id), str(principal_id))
