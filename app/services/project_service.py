"""Project lifecycle and membership operations.

The service keeps four reference sets in step:

- ``Project.members``: users who are members of a project
- ``User.projects``: ProjectRoles a user holds
- ``ProjectRole``: one record per (user, project) pair
- ``Team.projects``: team-typed projects owned by a team

A user is in ``project.members`` exactly when they hold a ProjectRole for
that project, and every team project is listed by its own team.

Each mutating operation is one unit of work. Steps are flushed in order so
later steps can use ids produced by earlier ones, and the session is
committed once at the end. Any failure rolls the whole operation back.

Admin/membership checks are not repeated here; routes run them through the
permission service before calling in.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import AsyncIterator, List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, StoreError, ValidationError
from ..models.project import Project, ProjectType
from ..models.project_role import ProjectRole, ProjectRoleType
from ..models.team import Team
from ..models.user import User
from ..repositories import (
    ProjectRepository,
    ProjectRoleRepository,
    TeamRepository,
    UserRepository,
)
from ..schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "start_date", "end_date")
# Fields that may be changed but never cleared, with their wire names
REQUIRED_FIELDS = {"title": "title", "start_date": "startDate", "end_date": "endDate"}


@dataclass
class ProjectMembership:
    """A project together with one member and the role they were granted."""

    project: Project
    role: ProjectRole
    user: User


@dataclass
class MemberRemoval:
    project: Project
    member: User


def _add_to_set(collection: list, item) -> None:
    if item not in collection:
        collection.append(item)


def _remove_from_set(collection: list, item) -> None:
    if item in collection:
        collection.remove(item)


class ProjectService:
    """
    Service class for the project lifecycle.

    Args:
        db: SQLAlchemy async database session
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.projects = ProjectRepository(db)
        self.roles = ProjectRoleRepository(db)
        self.users = UserRepository(db)
        self.teams = TeamRepository(db)

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"{operation} failed in the store: {e}")
            raise StoreError(f"{operation} failed") from e
        except Exception:
            await self.db.rollback()
            raise

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_project(self, data: ProjectCreate, acting_user: User) -> ProjectMembership:
        """
        Create a project and make the acting user its admin.

        Raises:
            ValidationError: If a team project names no team
            NotFoundError: If the named team does not exist
        """
        async with self._unit_of_work("createProject"):
            acting_user = await self.users.get(acting_user.id)

            team = None
            if data.type == ProjectType.TEAM:
                if data.team is None:
                    raise ValidationError("team is required for team projects")
                team = await self.teams.get(data.team)

            values = dict(
                title=data.title,
                description=data.description,
                type=data.type.value,
                end_date=data.end_date,
                team_id=team.id if team else None,
                members=[],
                tasks=[],
            )
            if data.start_date is not None:
                values["start_date"] = data.start_date
            project = await self.projects.create(**values)

            project_role = await self.roles.create(
                user_id=acting_user.id,
                role=ProjectRoleType.ADMIN.value,
                project_id=project.id,
            )
            _add_to_set(acting_user.projects, project_role)
            await self.users.save(acting_user)

            _add_to_set(project.members, acting_user)
            await self.projects.save(project)

            if team is not None:
                _add_to_set(team.projects, project)
                await self.teams.save(team)

        logger.info(f"Project {project.id} ({project.title}) created by {acting_user.id}")
        return ProjectMembership(project=project, role=project_role, user=acting_user)

    async def add_member(
        self,
        project_id: UUID,
        member_id: UUID,
        role: ProjectRoleType,
    ) -> ProjectMembership:
        """
        Add a user to a project with the given role.

        Raises:
            NotFoundError: If the project or user does not exist
            ValidationError: If the user already holds a role for the project
        """
        async with self._unit_of_work("addProjectMember"):
            project = await self.projects.get(project_id)
            member = await self.users.get(member_id)

            if await self.roles.find_for(member.id, project.id) is not None:
                raise ValidationError(f"user is already a member of {project.title}")

            _add_to_set(project.members, member)
            await self.projects.save(project)

            member_role = await self.roles.create(
                user_id=member.id,
                role=ProjectRoleType(role).value,
                project_id=project.id,
            )
            _add_to_set(member.projects, member_role)
            await self.users.save(member)

        logger.info(f"User {member.id} added to project {project.id} as {member_role.role}")
        return ProjectMembership(project=project, role=member_role, user=member)

    async def remove_member(self, project_id: UUID, member_id: UUID) -> MemberRemoval:
        """
        Remove a user from a project and delete their role.

        Raises:
            NotFoundError: If the project, user or role does not exist
        """
        async with self._unit_of_work("removeProjectMember"):
            project = await self.projects.get(project_id)
            member = await self.users.get(member_id)

            member_role = await self.roles.find_for(member.id, project.id)
            if member_role is None:
                raise NotFoundError("ProjectRole")

            _remove_from_set(project.members, member)
            await self.projects.save(project)

            _remove_from_set(member.projects, member_role)
            await self.users.save(member)

            await self.roles.delete(member_role)

        logger.info(f"User {member.id} removed from project {project.id}")
        return MemberRemoval(project=project, member=member)

    async def update_project(self, project_id: UUID, data: ProjectUpdate) -> Project:
        """
        Overwrite the provided fields; everything else is left as is.

        Raises:
            ValidationError: If a required field is sent as null
            NotFoundError: If the project does not exist
        """
        updates = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if field in UPDATABLE_FIELDS
        }
        for field, wire_name in REQUIRED_FIELDS.items():
            if field in updates and updates[field] is None:
                raise ValidationError(f"{wire_name} is required")

        async with self._unit_of_work("updateProject"):
            if updates:
                updates["updated_at"] = datetime.utcnow()
                project = await self.projects.update(project_id, **updates)
            else:
                project = await self.projects.get(project_id)

        return project

    async def delete_project(self, project_id: UUID) -> str:
        """
        Delete a project and cascade to its team link and roles.

        Returns:
            Confirmation message naming the deleted project.
        """
        async with self._unit_of_work("deleteProject"):
            project = await self.projects.get(project_id)
            title = project.title

            if project.is_team_project and project.team_id is not None:
                team = await self.teams.find(project.team_id)
                if team is None:
                    logger.warning(
                        f"Team {project.team_id} of project {project.id} no longer exists"
                    )
                else:
                    await self._unlink_from_team(team, project)

            project_roles = await self.roles.find_by_project(project.id)
            holders = await self.users.find_by_ids(role.user_id for role in project_roles)
            holders_by_id = {user.id: user for user in holders}
            for role in project_roles:
                holder = holders_by_id.get(role.user_id)
                if holder is not None:
                    _remove_from_set(holder.projects, role)
            await self.users.flush()

            for role in project_roles:
                await self.roles.delete(role)

            await self.projects.delete(project)

        logger.info(f"Project {project_id} ({title}) deleted with {len(project_roles)} role(s)")
        return f"{title} deleted"

    async def _unlink_from_team(self, team: Team, project: Project) -> None:
        _remove_from_set(team.projects, project)
        await self.teams.save(team)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def show_project(self, project_id: UUID) -> Project:
        """The project with its tasks (and their assignees) loaded."""
        return await self.projects.get(project_id)

    async def list_personal_projects(self, acting_user: User) -> List[Project]:
        """Personal projects the acting user is a member of."""
        return await self.projects.find_personal_for(acting_user.id)


def get_project_service(db: AsyncSession) -> ProjectService:
    """Factory function to create a ProjectService instance."""
    return ProjectService(db)
