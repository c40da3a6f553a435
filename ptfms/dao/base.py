"""Data-access objects: one class per table, one session per call.

Every write verb reports failure as ``False`` and logs the database error;
callers check the result instead of catching exceptions.
"""
import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ptfms.database import async_session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class BaseDAO(Generic[ModelT]):
    model: type

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self._session_factory = session_factory or async_session

    async def add(self, record: ModelT) -> bool:
        """Insert ``record`` and write the generated id back into it."""
        async with self._session_factory() as session:
            try:
                session.add(record)
                await session.commit()
                await session.refresh(record)
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to insert %s", self.model.__tablename__)
                return False
        return True

    async def get(self, record_id: int) -> ModelT | None:
        async with self._session_factory() as session:
            return await session.get(self.model, record_id)

    async def list_all(self) -> list[ModelT]:
        return await self._fetch(select(self.model).order_by(self.model.id))

    async def update(self, record: ModelT) -> bool:
        if getattr(record, "id", None) is None:
            return False
        async with self._session_factory() as session:
            try:
                existing = await session.get(self.model, record.id)
                if existing is None:
                    return False
                await session.merge(record)
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to update %s id=%s", self.model.__tablename__, record.id)
                return False
        return True

    async def delete(self, record_id: int) -> bool:
        async with self._session_factory() as session:
            try:
                existing = await session.get(self.model, record_id)
                if existing is None:
                    return False
                await session.delete(existing)
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to delete %s id=%s", self.model.__tablename__, record_id)
                return False
        return True

    async def _fetch(self, statement: Any) -> list[ModelT]:
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return list(result.scalars().all())

    async def _fetch_one(self, statement: Any) -> ModelT | None:
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return result.scalars().first()
