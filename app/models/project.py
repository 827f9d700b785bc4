"""Project SQLAlchemy model and the project-to-member reference set."""

import uuid
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import relationship

from ..database import Base

if TYPE_CHECKING:
    from .task import Task
    from .user import User


class ProjectType(str, Enum):
    """Kinds of project. Team projects belong to exactly one Team."""

    PERSONAL = "personal"
    TEAM = "team"


def _today() -> date:
    return datetime.utcnow().date()


# Reference set: users who are members of a project (Project.members)
ProjectMembers = Table(
    "ProjectMembers",
    Base.metadata,
    Column(
        "project_id",
        Uuid,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Uuid,
        ForeignKey("Users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Project(Base):
    """
    Project model representing a unit of collaborative work.

    A user is in ``members`` exactly when they hold a ProjectRole for the
    project. Keeping the two in step is the job of the project service.

    Attributes:
        id: Unique identifier (UUID)
        title: Project title
        description: Project description
        type: 'personal' or 'team'
        start_date: Start date (defaults to creation day)
        end_date: End date
        team_id: FK to the owning team (team projects only)
        members: Users who are members of the project
        tasks: Tasks belonging to the project
        created_at: Timestamp when project was created
        updated_at: Timestamp when project was last updated
    """

    __tablename__ = "Projects"
    __allow_unmapped__ = True

    # Primary key - UUID
    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    title = Column(
        String(255),
        nullable=False,
    )
    description = Column(
        Text,
        nullable=True,
    )
    type = Column(
        String(20),
        nullable=False,
        index=True,
    )
    start_date = Column(
        Date,
        default=_today,
        nullable=False,
    )
    end_date = Column(
        Date,
        nullable=False,
    )

    team_id = Column(
        Uuid,
        ForeignKey("Teams.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
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
    members = relationship(
        "User",
        secondary=ProjectMembers,
        lazy="selectin",
    )
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @property
    def is_team_project(self) -> bool:
        return self.type == ProjectType.TEAM.value

    def has_member(self, user_id: uuid.UUID) -> bool:
        """Check whether a user id is in the member set."""
        return any(member.id == user_id for member in self.members)

    def __repr__(self) -> str:
        """String representation of Project."""
        return f"<Project(id={self.id}, title={self.title}, type={self.type})>"
