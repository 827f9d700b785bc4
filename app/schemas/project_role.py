"""Pydantic schemas for ProjectRole responses."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from ..models.project_role import ProjectRole, ProjectRoleType
from .base import ApiModel


class ProjectRoleResponse(ApiModel):
    """Schema for a project role record."""

    id: UUID = Field(
        ...,
        description="Unique project role identifier",
    )
    user: UUID = Field(
        ...,
        description="ID of the user holding the role",
    )
    project: UUID = Field(
        ...,
        description="ID of the project",
    )
    role: ProjectRoleType = Field(
        ...,
        description="Role of the user (admin or contributor)",
    )
    created_at: Optional[datetime] = Field(
        None,
        description="When the role was granted",
    )

    @classmethod
    def from_model(cls, role: ProjectRole) -> "ProjectRoleResponse":
        return cls(
            id=role.id,
            user=role.user_id,
            project=role.project_id,
            role=role.role,
            created_at=role.created_at,
        )
