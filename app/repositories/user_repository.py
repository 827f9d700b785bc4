"""Repositories for users and teams."""

from typing import Iterable, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.team import Team
from ..models.user import User
from .base import Repository


class UserRepository(Repository[User]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, User, label="User")

    async def find_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        ids = list(set(user_ids))
        if not ids:
            return []
        return await self.find_many(User.id.in_(ids))


class TeamRepository(Repository[Team]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Team, label="Team")
