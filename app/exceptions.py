"""Error taxonomy for project membership and authorization.

Every failure raised by the repositories, guards and lifecycle operations is a
``ProjectServiceError``. The HTTP layer renders all of them the same way
(status 400 with ``{"message": ...}``); the subclasses exist so callers and
tests can tell the failure kinds apart.
"""


class ProjectServiceError(Exception):
    """Base class for all project service failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(ProjectServiceError):
    """A required field is missing or a request cannot be applied."""


class NotFoundError(ProjectServiceError):
    """A referenced Project, User, Team or ProjectRole does not exist."""

    def __init__(self, entity: str, entity_id=None):
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} with ID {entity_id} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class NotAMemberError(ProjectServiceError):
    """The acting user is not in the project's member set."""


class NotAuthorizedError(ProjectServiceError):
    """The acting user does not hold the admin role for the project."""


class StoreError(ProjectServiceError):
    """The underlying persistence layer failed."""
