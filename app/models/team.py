"""Team SQLAlchemy model and its member/project reference sets."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import relationship

from ..database import Base

if TYPE_CHECKING:
    from .project import Project
    from .user import User


def _team_user_table(name: str) -> Table:
    return Table(
        name,
        Base.metadata,
        Column(
            "team_id",
            Uuid,
            ForeignKey("Teams.id", ondelete="CASCADE"),
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


# Team members are partitioned by role
TeamAdmins = _team_user_table("TeamAdmins")
TeamContributors = _team_user_table("TeamContributors")

TeamProjects = Table(
    "TeamProjects",
    Base.metadata,
    Column(
        "team_id",
        Uuid,
        ForeignKey("Teams.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "project_id",
        Uuid,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        primary_key=True,
        unique=True,
    ),
)


class Team(Base):
    """
    Team model grouping users and team-typed projects.

    Teams are created and staffed outside this service; projects only
    register and unregister themselves in ``projects``.

    Attributes:
        id: Unique identifier (UUID)
        title: Team title
        description: Team description
        admins: Users holding the team admin role
        contributors: Users holding the team contributor role
        projects: Team-typed projects owned by the team
        created_at: Timestamp when team was created
        updated_at: Timestamp when team was last updated
    """

    __tablename__ = "Teams"
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
    admins = relationship(
        "User",
        secondary=TeamAdmins,
        lazy="selectin",
    )
    contributors = relationship(
        "User",
        secondary=TeamContributors,
        lazy="selectin",
    )
    projects = relationship(
        "Project",
        secondary=TeamProjects,
        lazy="selectin",
    )

    @property
    def members(self) -> dict:
        """Members keyed by team role."""
        return {"admin": list(self.admins), "contributor": list(self.contributors)}

    def __repr__(self) -> str:
        """String representation of Team."""
        return f"<Team(id={self.id}, title={self.title})>"
