from datetime import date, datetime
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_statistics_query_repo import IStatisticsQueryRepo
from src.service.restaurant.domain.value_object.restaurant_statistics import RestaurantStatistics


class GetStatisticsUseCase:
    def __init__(
        self,
        statistics_query_repo: IStatisticsQueryRepo,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.statistics_query_repo = statistics_query_repo
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        statistics_query_repo: IStatisticsQueryRepo = Depends(
            Provide[Container.statistics_query_repo]
        ),
    ) -> Self:
        return cls(statistics_query_repo=statistics_query_repo)

    @Logger.io
    async def get_statistics(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> RestaurantStatistics:
        return await self.statistics_query_repo.get_statistics(
            start_date=start_date, end_date=end_date, now=self.clock()
        )
