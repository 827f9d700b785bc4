"""Pydantic schemas for Project requests and responses."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..models.project import Project, ProjectType
from ..models.project_role import ProjectRoleType
from .base import ApiModel
from .project_role import ProjectRoleResponse
from .task import TaskSummary
from .user import UserResponse


class ProjectCreate(ApiModel):
    """Schema for creating a new project."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Project title",
        examples=["Launch"],
    )
    description: Optional[str] = Field(
        None,
        description="Project description",
    )
    type: ProjectType = Field(
        ...,
        description="Project type (personal or team)",
        examples=["personal", "team"],
    )
    start_date: Optional[date] = Field(
        None,
        description="Project start date (defaults to today)",
    )
    end_date: date = Field(
        ...,
        description="Project end date",
        examples=["2025-01-01"],
    )
    team: Optional[UUID] = Field(
        None,
        description="ID of the owning team (required for team projects)",
    )


class ProjectUpdate(ApiModel):
    """Schema for updating a project. Only provided fields are applied."""

    title: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Project title",
    )
    description: Optional[str] = Field(
        None,
        description="Project description",
    )
    start_date: Optional[date] = Field(
        None,
        description="Project start date",
    )
    end_date: Optional[date] = Field(
        None,
        description="Project end date",
    )


class ProjectResponse(ApiModel):
    """Schema for project response with member and task references."""

    id: UUID = Field(
        ...,
        description="Unique project identifier",
    )
    title: str
    description: Optional[str] = None
    type: ProjectType
    start_date: date
    end_date: date
    team: Optional[UUID] = Field(
        None,
        description="ID of the owning team (team projects only)",
    )
    members: List[UUID] = Field(
        default_factory=list,
        description="IDs of the project's members",
    )
    tasks: List[UUID] = Field(
        default_factory=list,
        description="IDs of the project's tasks",
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def common_fields(cls, project: Project) -> dict:
        return dict(
            id=project.id,
            title=project.title,
            description=project.description,
            type=project.type,
            start_date=project.start_date,
            end_date=project.end_date,
            team=project.team_id,
            members=[member.id for member in project.members],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    @classmethod
    def from_model(cls, project: Project) -> "ProjectResponse":
        return cls(
            **cls.common_fields(project),
            tasks=[task.id for task in project.tasks],
        )


class ProjectDetail(ProjectResponse):
    """Project with task references expanded."""

    tasks: List[TaskSummary] = Field(
        default_factory=list,
        description="Tasks with title, due date, assignee and status",
    )

    @classmethod
    def from_model(cls, project: Project) -> "ProjectDetail":
        return cls(
            **cls.common_fields(project),
            tasks=[TaskSummary.from_model(task) for task in project.tasks],
        )


class PersonalProjects(ApiModel):
    """Personal projects the acting user is a member of."""

    projects: List[ProjectDetail] = Field(default_factory=list)


class ProjectCreated(ApiModel):
    """Result of creating a project."""

    project: ProjectResponse
    project_role: ProjectRoleResponse
    user: UserResponse


class AddProjectMemberRequest(ApiModel):
    """Request schema for adding a project member."""

    member: UUID = Field(
        ...,
        description="ID of the user being added to the project",
    )
    role: ProjectRoleType = Field(
        ...,
        description="Role for the new member (admin or contributor)",
    )


class ProjectMemberAdded(ApiModel):
    """Result of adding a member."""

    project: ProjectResponse
    member_role: ProjectRoleResponse
    member: UserResponse


class ProjectMemberRemoved(ApiModel):
    """Result of removing a member."""

    project: ProjectResponse
    member: UserResponse


class ProjectDeleted(ApiModel):
    """Confirmation of a deleted project."""

    message: str
