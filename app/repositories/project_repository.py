"""Repositories for projects and their roles."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.project import Project, ProjectMembers, ProjectType
from ..models.project_role import ProjectRole
from .base import Repository


class ProjectRepository(Repository[Project]):
    """Project access, including the personal-project listing."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Project, label="Project")

    async def find_personal_for(self, user_id: UUID) -> List[Project]:
        """Personal projects whose member set contains the user."""
        query = (
            select(Project)
            .join(ProjectMembers, ProjectMembers.c.project_id == Project.id)
            .where(
                ProjectMembers.c.user_id == user_id,
                Project.type == ProjectType.PERSONAL.value,
            )
            .order_by(Project.created_at.asc())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
            return list(result.scalars().unique().all())
        except SQLAlchemyError as e:
            raise self._store_error("find_personal_for", e) from e


class ProjectRoleRepository(Repository[ProjectRole]):
    """ProjectRole access keyed by (user, project)."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ProjectRole, label="ProjectRole")

    async def find_for(self, user_id: UUID, project_id: UUID) -> Optional[ProjectRole]:
        """The unique role a user holds on a project, or None."""
        return await self.find_one(
            ProjectRole.user_id == user_id,
            ProjectRole.project_id == project_id,
        )

    async def find_by_project(self, project_id: UUID) -> List[ProjectRole]:
        """Every role granted on a project."""
        return await self.find_many(ProjectRole.project_id == project_id)
