"""Permission service: the gate checks run before project operations.

Two checks guard the project endpoints:

- Membership: the acting user must be in the project's member set
  (required to view a project).
- Admin: the acting user must hold an admin ProjectRole for the project
  (required to change membership, update or delete a project).

Both checks are read-only. A failed check raises before the guarded
operation runs.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..exceptions import NotAMemberError, NotAuthorizedError
from ..models.project import Project
from ..models.project_role import ProjectRole
from ..models.user import User
from ..repositories import ProjectRepository, ProjectRoleRepository
from .auth_service import get_current_user

logger = logging.getLogger(__name__)


class PermissionService:
    """
    Service class for project membership and admin checks.

    Args:
        db: SQLAlchemy async database session
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.projects = ProjectRepository(db)
        self.roles = ProjectRoleRepository(db)

    async def check_member(self, user: User, project_id: UUID) -> Project:
        """
        Verify the user is in the project's member set.

        Args:
            user: The acting user
            project_id: The project's ID

        Returns:
            The project, for callers that need it next.

        Raises:
            NotFoundError: If the project does not exist
            NotAMemberError: If the user is not a member
        """
        project = await self.projects.get(project_id)

        if not project.has_member(user.id):
            logger.info(f"User {user.id} denied access to project {project_id}: not a member")
            raise NotAMemberError(f"user is not a member of {project.title}")

        return project

    async def check_admin(self, user: User, project_id: UUID) -> ProjectRole:
        """
        Verify the user holds the admin role for the project.

        Args:
            user: The acting user
            project_id: The project's ID

        Returns:
            The user's admin ProjectRole.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: If the user has no role or a non-admin role
        """
        await self.projects.get(project_id)

        role = await self.roles.find_for(user.id, project_id)
        if role is None or not role.is_admin:
            logger.info(f"User {user.id} denied admin action on project {project_id}")
            raise NotAuthorizedError("user not authorized")

        return role


def get_permission_service(db: AsyncSession) -> PermissionService:
    """
    Factory function to create a PermissionService instance.

    Args:
        db: SQLAlchemy async database session

    Returns:
        PermissionService instance
    """
    return PermissionService(db)


# ============================================================================
# FastAPI dependencies
# ============================================================================


async def require_project_member(
    project_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
) -> User:
    """Route dependency: acting user must be a member of ``project_id``."""
    await get_permission_service(db).check_member(current_user, project_id)
    return current_user


async def require_project_admin(
    project_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
) -> User:
    """Route dependency: acting user must be an admin of ``project_id``."""
    await get_permission_service(db).check_admin(current_user, project_id)
    return current_user
