"""Projects API endpoints.

Provides endpoints for creating, viewing, updating and deleting projects and
for managing project membership. All endpoints require an identified user.

Access Control:
- Create project / list personal projects: any identified user
- Show project: project members
- Update/Delete project, add/remove members: project admins

Every failure is answered with status 400 and ``{"message": ...}``.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.user import User
from ..schemas.project import (
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
from ..schemas.project_role import ProjectRoleResponse
from ..schemas.user import UserResponse
from ..services.auth_service import get_current_user
from ..services.permission_service import require_project_admin, require_project_member
from ..services.project_service import get_project_service

router = APIRouter(prefix="/api/projects", tags=["Projects"])

ERROR_RESPONSES = {
    400: {"description": "Validation, lookup, authorization or store failure"},
    401: {"description": "Not authenticated"},
}


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new project",
    description="Create a project; the creator becomes its admin.",
    responses=ERROR_RESPONSES,
)
async def create_project(
    project_data: ProjectCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
) -> ProjectCreated:
    """
    Create a new project.

    - **title**: Project title (required)
    - **type**: 'personal' or 'team' (required)
    - **endDate**: Project end date (required)
    - **description**: Optional description
    - **startDate**: Optional start date (defaults to today)
    - **team**: Owning team ID (required for team projects)
    """
    created = await get_project_service(db).create_project(project_data, current_user)

    return ProjectCreated(
        project=ProjectResponse.from_model(created.project),
        project_role=ProjectRoleResponse.from_model(created.role),
        user=UserResponse.from_model(created.user),
    )


@router.get(
    "/personal",
    response_model=PersonalProjects,
    summary="List personal projects",
    description="Personal projects the current user is a member of, with tasks expanded.",
    responses=ERROR_RESPONSES,
)
async def list_personal_projects(
    current_user: Annotated[User, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
) -> PersonalProjects:
    projects = await get_project_service(db).list_personal_projects(current_user)
    return PersonalProjects(projects=[ProjectDetail.from_model(p) for p in projects])


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Show a project",
    description="Get a project with its tasks expanded. Members only.",
    responses=ERROR_RESPONSES,
)
async def show_project(
    project_id: UUID,
    current_user: Annotated[User, Depends(require_project_member)],
    db: AsyncSession = Depends(get_db),
) -> ProjectDetail:
    project = await get_project_service(db).show_project(project_id)
    return ProjectDetail.from_model(project)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    description="Overwrite any of title, description, startDate, endDate. Admins only.",
    responses=ERROR_RESPONSES,
)
async def update_project(
    project_id: UUID,
    project_data: ProjectUpdate,
    current_user: Annotated[User, Depends(require_project_admin)],
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """
    Update an existing project.

    Only the fields present in the request are changed.
    """
    project = await get_project_service(db).update_project(project_id, project_data)
    return ProjectResponse.from_model(project)


@router.delete(
    "/{project_id}",
    response_model=ProjectDeleted,
    summary="Delete a project",
    description="Delete a project, its roles and its team link. Admins only.",
    responses=ERROR_RESPONSES,
)
async def delete_project(
    project_id: UUID,
    current_user: Annotated[User, Depends(require_project_admin)],
    db: AsyncSession = Depends(get_db),
) -> ProjectDeleted:
    """
    Delete a project.

    Removes the project from its team, deletes every ProjectRole granted on
    it and drops those roles from their holders. This action is irreversible.
    """
    message = await get_project_service(db).delete_project(project_id)
    return ProjectDeleted(message=message)


@router.post(
    "/{project_id}/members",
    response_model=ProjectMemberAdded,
    status_code=status.HTTP_201_CREATED,
    summary="Add a project member",
    description="Add a user to the project with a role. Admins only.",
    responses=ERROR_RESPONSES,
)
async def add_project_member(
    project_id: UUID,
    member_data: AddProjectMemberRequest,
    current_user: Annotated[User, Depends(require_project_admin)],
    db: AsyncSession = Depends(get_db),
) -> ProjectMemberAdded:
    added = await get_project_service(db).add_member(
        project_id, member_data.member, member_data.role
    )

    return ProjectMemberAdded(
        project=ProjectResponse.from_model(added.project),
        member_role=ProjectRoleResponse.from_model(added.role),
        member=UserResponse.from_model(added.user),
    )


@router.delete(
    "/{project_id}/members/{member_id}",
    response_model=ProjectMemberRemoved,
    summary="Remove a project member",
    description="Remove a user from the project and delete their role. Admins only.",
    responses=ERROR_RESPONSES,
)
async def remove_project_member(
    project_id: UUID,
    member_id: UUID,
    current_user: Annotated[User, Depends(require_project_admin)],
    db: AsyncSession = Depends(get_db),
) -> ProjectMemberRemoved:
    removed = await get_project_service(db).remove_member(project_id, member_id)

    return ProjectMemberRemoved(
        project=ProjectResponse.from_model(removed.project),
        member=UserResponse.from_model(removed.member),
    )
