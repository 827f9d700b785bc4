"""Pydantic schemas package."""

from .base import ApiModel
from .project import (
    AddProjectMemberRequest,
    PersonalProjects,
    ProjectCreate,
    ProjectCreated,
    ProjectDeleted,
    ProjectDetail,
    ProjectMemberAdded,
    ProjectMemberRemoved,
    ProjectResponse,
    ProjectUpdate,
)
from .project_role import ProjectRoleResponse
from .task import TaskAssignee, TaskSummary
from .user import UserResponse, UserSummary

__all__ = [
    "AddProjectMemberRequest",
    "ApiModel",
    "PersonalProjects",
    "ProjectCreate",
    "ProjectCreated",
    "ProjectDeleted",
    "ProjectDetail",
    "ProjectMemberAdded",
    "ProjectMemberRemoved",
    "ProjectResponse",
    "ProjectRoleResponse",
    "ProjectUpdate",
    "TaskAssignee",
    "TaskSummary",
    "UserResponse",
    "UserSummary",
]
