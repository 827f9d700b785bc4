"""Pydantic schemas for User responses."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..models.user import User
from .base import ApiModel


class UserSummary(ApiModel):
    """User summary for display in member lists and task assignees."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    first_name: Optional[str] = Field(None, description="User's first name")
    last_name: Optional[str] = Field(None, description="User's last name")
    full_name: str = Field("", description="First and last name")


class UserResponse(UserSummary):
    """User with the ids of the ProjectRoles they hold."""

    projects: List[UUID] = Field(
        default_factory=list,
        description="IDs of the ProjectRoles held by the user",
    )

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            projects=[role.id for role in user.projects],
        )
