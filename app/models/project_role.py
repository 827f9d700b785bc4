"""ProjectRole SQLAlchemy model binding one user to one project with a role."""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint, Uuid

from ..database import Base


class ProjectRoleType(str, Enum):
    """Roles a user can hold on a project.

    - ADMIN: may change membership, update or delete the project
    - CONTRIBUTOR: regular member
    """

    ADMIN = "admin"
    CONTRIBUTOR = "contributor"


class ProjectRole(Base):
    """
    ProjectRole model: the join record granting a user a role on a project.

    A (user, project) pair has at most one ProjectRole. Roles are immutable
    once created; they are only ever deleted.

    Attributes:
        id: Unique identifier (UUID)
        user_id: FK to the user holding the role
        project_id: FK to the project
        role: 'admin' or 'contributor'
        created_at: Timestamp when the role was granted
    """

    __tablename__ = "ProjectRoles"
    __allow_unmapped__ = True
    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_ProjectRoles_user_project"),
    )

    # Primary key - UUID
    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    # Foreign keys
    user_id = Column(
        Uuid,
        ForeignKey("Users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    project_id = Column(
        Uuid,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role = Column(
        String(20),
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ProjectRoleType.ADMIN.value

    def __repr__(self) -> str:
        """String representation of ProjectRole."""
        return f"<ProjectRole(id={self.id}, user_id={self.user_id}, project_id={self.project_id}, role={self.role})>"
