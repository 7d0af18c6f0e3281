import logging
from typing import Annotated

from sqlalchemy import MetaData, String
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass, mapped_column

# some useful re-usable column types
# dataclass args (init, default) cannot be part of annotations and must be explicit
StrPk = Annotated[str, mapped_column(String(36), primary_key=True)]
# owner ids come from whatever auth layer sits above us, so they are opaque text
UserId = Annotated[str, mapped_column(String, index=True)]


class Base(MappedAsDataclass, DeclarativeBase):
    """
    Base model for all of the tables
    Uses SQLAlchemy's declarative dataclass mapping API
    """

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s",
        }
    )


class Database:
    """
    Handle on the backend: one async engine and the session factory bound to it.

    Create one per process, ``await init()`` on start and ``await close()`` on
    shutdown (or use it as an async context manager).
    """

    def __init__(self, connection: str):
        self.engine = create_async_engine(connection)
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)

    async def init(self):
        """Create any missing tables. This is not a migration system."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logging.info(f"Database ready at {self.engine.url!r}")

    def session(self) -> AsyncSession:
        return self._sessions()

    async def close(self):
        await self.engine.dispose()
        logging.info("Database connections closed")

    async def __aenter__(self) -> "Database":
        await self.init()
        return self

    async def __aexit__(self, *exc):
        await self.close()
