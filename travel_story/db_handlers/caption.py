from __future__ import annotations

import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_story.db_handlers.base import BaseDBHandler
from travel_story.models.caption import Caption
from travel_story.utils.logger import setup_logger

logger = setup_logger("db_handlers.caption")


class CaptionDBHandler(BaseDBHandler[Caption]):
    def __init__(self):
        super().__init__(Caption)

    async def get_captions_for_user(
        self, user_id: uuid.UUID, *, db: AsyncSession
    ) -> list[Caption]:
        """Get every caption owned by a user, favourites first, then in insertion order."""
        try:
            return await self.get_multi_by_attributes(
                db=db,
                user_id=user_id,
                order_by=[Caption.is_favourite.desc(), Caption.id.asc()],
            )
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving captions for user {user_id}: {e}")
            raise
