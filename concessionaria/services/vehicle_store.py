import asyncio
import logging
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from concessionaria.models.vehicle import Vehicle
from concessionaria.services.store_results import (
    Found,
    ListOutcome,
    Listed,
    NotFound,
    RecordOutcome,
    StoreFailure,
)

logger = logging.getLogger(__name__)

# asyncio.TimeoutError is not an OSError before Python 3.11
STORE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def _failure(operation: str, exc: Exception) -> StoreFailure:
    # Surface the driver's own text rather than SQLAlchemy's wrapper with the SQL statement
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig)
    else:
        message = str(exc) or type(exc).__name__
    logger.error("Store failure during %s: %s", operation, message)
    return StoreFailure(message)


class VehicleStore:
    """Key-based access to the ``veiculos`` table.

    One session per call and at most one commit per mutation.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_all(self) -> ListOutcome:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Vehicle).order_by(Vehicle.created_at.desc(), Vehicle.id.desc())
                )
                return Listed(list(result.scalars().all()))
        except STORE_ERRORS as exc:
            return _failure("list", exc)

    async def get_by_key(self, vehicle_id: int) -> RecordOutcome:
        try:
            async with self._session_factory() as session:
                vehicle = await session.get(Vehicle, vehicle_id)
        except STORE_ERRORS as exc:
            return _failure("get", exc)
        if vehicle is None:
            return NotFound()
        return Found(vehicle)

    async def insert(self, fields: dict[str, Any]) -> RecordOutcome:
        try:
            async with self._session_factory() as session:
                vehicle = Vehicle(**fields)
                session.add(vehicle)
                await session.commit()
                await session.refresh(vehicle)
        except STORE_ERRORS as exc:
            return _failure("insert", exc)
        return Found(vehicle)

    async def update_by_key(self, vehicle_id: int, fields: dict[str, Any]) -> RecordOutcome:
        statement = update(Vehicle).where(Vehicle.id == vehicle_id).values(**fields).returning(Vehicle)
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                vehicle = result.scalars().first()
                await session.commit()
        except STORE_ERRORS as exc:
            return _failure("update", exc)
        # Zero rows affected is the not-found signal
        if vehicle is None:
            return NotFound()
        return Found(vehicle)

    async def delete_by_key(self, vehicle_id: int) -> RecordOutcome:
        statement = delete(Vehicle).where(Vehicle.id == vehicle_id).returning(Vehicle)
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                vehicle = result.scalars().first()
                await session.commit()
        except STORE_ERRORS as exc:
            return _failure("delete", exc)
        if vehicle is None:
            return NotFound()
        return Found(vehicle)
