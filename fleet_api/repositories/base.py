"""
Generic async CRUD repository over a single model.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_api.database import Base
from fleet_api.exceptions import (
    IdMismatchError,
    InvalidRecordError,
    RecordNotFoundError,
    UpdateConflictError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """
    Create, read, replace and delete records of one model.

    Subclasses set ``model`` and ``record_name`` and may override
    ``validate`` to check constraints before writing.
    """

    model: Type[ModelT]
    record_name: str = "Record"
    # Columns the database fills in when a write leaves them empty
    server_defaults: Tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[ModelT]:
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def get(self, record_id: int) -> ModelT:
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        record = result.scalar_one_or_none()
        if record is None:
            logger.warning("%s %s not found", self.record_name, record_id)
            raise RecordNotFoundError(self.record_name, record_id)
        return record

    async def exists(self, record_id: int) -> bool:
        result = await self.session.execute(select(self.model.id).where(self.model.id == record_id))
        return result.first() is not None

    async def create(self, data: BaseModel) -> ModelT:
        values = self._values(data)
        await self.validate(values)

        record = self.model(**values)
        self.session.add(record)
        await self._commit(values)
        await self.session.refresh(record)

        logger.info("%s created with ID: %s", self.record_name, record.id)
        return record

    async def update(self, record_id: int, data: BaseModel) -> None:
        """
        Replace the stored record wholesale.

        A single UPDATE is issued; if it matches no row the record is
        looked up again to tell a missing record from a lost write.
        """
        body_id = getattr(data, "id", None)
        if body_id != record_id:
            logger.warning("%s ID mismatch: %s vs %s", self.record_name, record_id, body_id)
            raise IdMismatchError(record_id, body_id)

        values = self._values(data)
        values.pop("id", None)

        statement = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(statement)
        except IntegrityError as exc:
            await self.session.rollback()
            await self.validate(values, record_id=record_id)
            raise InvalidRecordError(f"{self.record_name} violates a data constraint") from exc

        if result.rowcount == 0:
            await self.session.rollback()
            if not await self.exists(record_id):
                logger.warning("%s %s not found during update", self.record_name, record_id)
                raise RecordNotFoundError(self.record_name, record_id)
            raise UpdateConflictError(f"{self.record_name} {record_id} was not updated")

        await self._commit(values, record_id=record_id)
        logger.info("%s %s updated", self.record_name, record_id)

    async def delete(self, record_id: int) -> None:
        record = await self.get(record_id)
        await self.session.delete(record)
        await self.session.commit()
        logger.info("%s %s deleted", self.record_name, record_id)

    async def validate(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        """Raise ``InvalidRecordError`` if ``values`` cannot be written."""

    def _values(self, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump()
        for field in self.server_defaults:
            if values.get(field) is None:
                values.pop(field, None)
        return values

    async def _commit(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            await self.validate(values, record_id=record_id)
            raise InvalidRecordError(f"{self.record_name} violates a data constraint") from exc
