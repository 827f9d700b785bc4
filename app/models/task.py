"""Task SQLAlchemy model.

Tasks are managed elsewhere; projects only reference them and expand a few
of their fields when a project is shown.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from ..database import Base

if TYPE_CHECKING:
    from .project import Project
    from .user import User


class Task(Base):
    """
    Task model referenced by a project.

    Attributes:
        id: Unique identifier (UUID)
        project_id: FK to the parent project
        title: Task title
        due_date: Task due date
        assigned_to: FK to the assigned user
        status: Free-form task status
        created_at: Timestamp when task was created
    """

    __tablename__ = "Tasks"
    __allow_unmapped__ = True

    # Primary key - UUID
    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    # Foreign keys
    project_id = Column(
        Uuid,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    assigned_to = Column(
        Uuid,
        ForeignKey("Users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    title = Column(
        String(500),
        nullable=False,
    )
    due_date = Column(
        Date,
        nullable=True,
    )
    status = Column(
        String(50),
        nullable=True,
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    # Relationships
    project = relationship(
        "Project",
        back_populates="tasks",
    )
    assignee = relationship(
        "User",
        foreign_keys=[assigned_to],
        lazy="joined",
    )

    def __repr__(self) -> str:
        """String representation of Task."""
        return f"<Task(id={self.id}, project_id={self.project_id}, title={self.title})>"
