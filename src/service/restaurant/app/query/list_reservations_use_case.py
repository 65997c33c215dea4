from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus


class ListReservationsUseCase:
    """Admin listing: a date filter wins over a status filter; neither lists everything"""

    def __init__(self, reservation_query_repo: IReservationQueryRepo):
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def list_reservations(
        self, day: Optional[date] = None, status: Optional[ReservationStatus] = None
    ) -> List[Reservation]:
        if day is not None:
            return await self.reservation_query_repo.list_by_date(day=day)
        if status is not None:
            return await self.reservation_query_repo.list_by_status(status=status)
        return await self.reservation_query_repo.list_all()
