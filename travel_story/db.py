import argparse
import asyncio
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from travel_story import models  # noqa: F401
from travel_story.config import Settings
from travel_story.models.base import Base
from travel_story.utils.logger import setup_logger

logger = setup_logger("db")


class Database:
    """Owns the async engine and the session factory of the application DB."""

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        if settings.is_sqlite:
            self.engine = create_async_engine(self.url, echo=False)
        else:
            self.engine = create_async_engine(
                self.url,
                pool_pre_ping=True,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_recycle=300,
                echo=False,
                connect_args={"timeout": settings.database_connect_timeout},
            )
        self.session_factory = async_sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_db(self):
        """Create all tables that do not exist yet."""
        if not Base.metadata.tables:
            logger.warning("Base.metadata.tables is EMPTY! No tables will be created.")
        else:
            logger.debug(
                f"Tables registered in Base.metadata: {list(Base.metadata.tables.keys())}"
            )
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema initialized.")

    async def reset_db(self):
        logger.warning("Dropping and recreating all tables. THIS IS A DESTRUCTIVE OPERATION.")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await self.init_db()
        logger.info("Database has been reset and re-initialized.")

    async def check_connection(self) -> bool:
        """Performs a simple query to check actual DB connectivity."""
        async with self.session_factory() as session:
            try:
                result = await session.execute(text("SELECT 1"))
                if result.scalar_one() == 1:
                    logger.info("Successfully connected to the database.")
                    return True
                raise RuntimeError("Test query returned an unexpected result.")
            except Exception as e:
                logger.error(f"Failed to execute test query: {e}", exc_info=True)
                raise RuntimeError("Database connectivity check failed.") from e

    async def close(self):
        logger.info("Closing database connections.")
        await self.engine.dispose()
        logger.info("Database connections closed.")


# --- Dependency for FastAPI ---
async def get_app_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session


if __name__ == "__main__":
    from travel_story.config import settings

    parser = argparse.ArgumentParser(description="Travel Story database utility")
    parser.add_argument(
        "action",
        choices=["init", "reset", "check"],
        help="'init' to create missing tables, 'reset' to drop and recreate all "
        "tables, 'check' to verify connectivity.",
    )
    args = parser.parse_args()

    database = Database(settings)

    async def run(action: str):
        try:
            if action == "init":
                await database.init_db()
            elif action == "reset":
                await database.reset_db()
            elif action == "check":
                await database.check_connection()
        finally:
            await database.close()

    if args.action == "reset":
        confirm = input(
            "WARNING: This will delete all users and captions. Are you sure? (yes/no): "
        )
        if confirm.lower() != "yes":
            logger.info("Database reset cancelled by user.")
            raise SystemExit(0)

    asyncio.run(run(args.action))
    logger.info("Database utility script finished.")
