from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_repo import ITableRepo
from src.service.restaurant.domain.enum.table_status import TableStatus


class UpdateTableStatusUseCase:
    def __init__(self, *, table_repo: ITableRepo) -> None:
        self.table_repo = table_repo

    @classmethod
    @inject
    def depends(cls, table_repo: ITableRepo = Depends(Provide[Container.table_repo])) -> Self:
        return cls(table_repo=table_repo)

    @Logger.io
    async def update_status(self, *, table_id: int, status: TableStatus) -> None:
        if not await self.table_repo.update_status(table_id=table_id, status=status):
            raise NotFoundError('Table not found')

        Logger.base.info(f'🪑 [TABLE-STATUS] Table {table_id} set to {status}')
