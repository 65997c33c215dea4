from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_repo import ITableRepo
from src.service.restaurant.domain.entity.table_entity import Table


class ListTablesUseCase:
    def __init__(self, table_repo: ITableRepo):
        self.table_repo = table_repo

    @classmethod
    @inject
    def depends(cls, table_repo: ITableRepo = Depends(Provide[Container.table_repo])) -> Self:
        return cls(table_repo=table_repo)

    @Logger.io
    async def list_tables(self) -> List[Table]:
        return await self.table_repo.list_all()
