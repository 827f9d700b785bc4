"""Business logic services."""

from .auth_service import (
    create_access_token,
    decode_access_token,
    get_current_user,
)
from .permission_service import (
    PermissionService,
    get_permission_service,
    require_project_admin,
    require_project_member,
)
from .project_service import (
    MemberRemoval,
    ProjectMembership,
    ProjectService,
    get_project_service,
)

__all__ = [
    # Auth service
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    # Permission service
    "PermissionService",
    "get_permission_service",
    "require_project_admin",
    "require_project_member",
    # Project service
    "MemberRemoval",
    "ProjectMembership",
    "ProjectService",
    "get_project_service",
]
