from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_story.db_handlers.base import BaseDBHandler
from travel_story.models.user import User
from travel_story.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    def __init__(self):
        super().__init__(User)

    async def get_user_by_email(self, email: str, *, db: AsyncSession) -> User | None:
        """Get a user by email."""
        try:
            stmt = select(User).filter(User.email == email)
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user by email: {e}")
            raise
