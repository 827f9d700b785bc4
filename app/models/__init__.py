"""SQLAlchemy ORM models package."""

from .project import Project, ProjectMembers, ProjectType
from .project_role import ProjectRole, ProjectRoleType
from .task import Task
from .team import Team, TeamAdmins, TeamContributors, TeamProjects
from .user import User, UserProjectRoles

__all__ = [
    "Project",
    "ProjectMembers",
    "ProjectRole",
    "ProjectRoleType",
    "ProjectType",
    "Task",
    "Team",
    "TeamAdmins",
    "TeamContributors",
    "TeamProjects",
    "User",
    "UserProjectRoles",
]
