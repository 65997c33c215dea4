from typing import List

from sqlalchemy import select, update

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_repo import ITableRepo
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.model.entity_mapper import table_to_entity
from src.service.restaurant.driven_adapter.model.table_model import TableModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


class TableRepoImpl(SessionProvider, ITableRepo):
    @Logger.io
    async def list_all(self) -> List[Table]:
        async with self._get_session() as session:
            result = await session.execute(select(TableModel).order_by(TableModel.table_number))
            return [table_to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def update_status(self, *, table_id: int, status: TableStatus) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(TableModel).where(TableModel.id == table_id).values(status=status.value)
            )
            await self._commit(session)
            return result.rowcount > 0  # type: ignore[attr-defined]
