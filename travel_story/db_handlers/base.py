from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_story.models.base import Base
from travel_story.utils.logger import setup_logger

logger = setup_logger("db_handlers")


ModelType = TypeVar("ModelType", bound=Base)


class BaseDBHandler(Generic[ModelType]):
    """Generic handler for database operations with basic CRUD methods.

    Handlers hold no session of their own; every call receives the request's
    ``AsyncSession`` through the ``db`` keyword.
    """

    def __init__(self, model: type[ModelType]):
        self.model = model

    async def create(self, obj_dict: dict[str, Any], *, db: AsyncSession) -> ModelType:
        """Create a new record in the database."""
        db_obj = self.model(**obj_dict)
        try:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            return db_obj
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"IntegrityError creating {self.model.__name__}: {e}")
            # Re-raise so calling code can handle it specifically
            raise
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}", exc_info=True)
            raise

    async def get(self, id: Any, *, db: AsyncSession) -> ModelType | None:
        """Get a single record by its primary key."""
        stmt = select(self.model).where(self.model.id == id)
        result = await db.execute(stmt)
        return result.scalars().first()

    async def get_multi_by_attributes(
        self, *, db: AsyncSession, order_by: Any = None, **kwargs
    ) -> list[ModelType]:
        """Get all records matching a set of attributes, optionally ordered."""
        stmt = select(self.model).filter_by(**kwargs)

        if order_by is not None:
            if isinstance(order_by, list):
                stmt = stmt.order_by(*order_by)
            else:
                stmt = stmt.order_by(order_by)

        result = await db.execute(stmt)
        return list(result.scalars().all())
