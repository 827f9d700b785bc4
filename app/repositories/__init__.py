"""Data access layer."""

from .base import Repository
from .project_repository import ProjectRepository, ProjectRoleRepository
from .user_repository import TeamRepository, UserRepository

__all__ = [
    "ProjectRepository",
    "ProjectRoleRepository",
    "Repository",
    "TeamRepository",
    "UserRepository",
]
