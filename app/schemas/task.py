"""Pydantic schemas for the task fields expanded inside a project."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import Field

from ..models.task import Task
from .base import ApiModel


class TaskAssignee(ApiModel):
    """Name fields of the user a task is assigned to."""

    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: str = ""


class TaskSummary(ApiModel):
    """Task reference expanded to title, due date, assignee and status."""

    id: UUID = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    due_date: Optional[date] = Field(None, description="Task due date")
    assigned_to: Optional[TaskAssignee] = Field(None, description="Assigned user")
    status: Optional[str] = Field(None, description="Task status")

    @classmethod
    def from_model(cls, task: Task) -> "TaskSummary":
        assignee = None
        if task.assignee is not None:
            assignee = TaskAssignee(
                id=task.assignee.id,
                first_name=task.assignee.first_name,
                last_name=task.assignee.last_name,
                full_name=task.assignee.full_name,
            )
        return cls(
            id=task.id,
            title=task.title,
            due_date=task.due_date,
            assigned_to=assignee,
            status=task.status,
        )
