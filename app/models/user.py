"""User SQLAlchemy model and the user-to-role reference set."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import relationship

from ..database import Base

if TYPE_CHECKING:
    from .project_role import ProjectRole


# Reference set: the ProjectRoles a user holds (User.projects)
UserProjectRoles = Table(
    "UserProjectRoles",
    Base.metadata,
    Column(
        "user_id",
        Uuid,
        ForeignKey("Users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "project_role_id",
        Uuid,
        ForeignKey("ProjectRoles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(Base):
    """
    User model representing people who can collaborate on projects.

    Identity and profile data are owned upstream; this service only keeps
    the fields it needs to render members and task assignees, plus the set
    of ProjectRoles the user holds.

    Attributes:
        id: Unique identifier (UUID)
        email: User's email address (unique)
        first_name: Given name
        last_name: Family name
        projects: ProjectRoles held by the user (one per project)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
    """

    __tablename__ = "Users"
    __allow_unmapped__ = True

    # Primary key - UUID
    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Profile fields
    first_name = Column(
        String(100),
        nullable=True,
    )
    last_name = Column(
        String(100),
        nullable=True,
    )

    # Timestamps
    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    # Relationships
    projects = relationship(
        "ProjectRole",
        secondary=UserProjectRoles,
        lazy="selectin",
    )

    @property
    def full_name(self) -> str:
        """First and last name joined, skipping whichever is missing."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email={self.email})>"
