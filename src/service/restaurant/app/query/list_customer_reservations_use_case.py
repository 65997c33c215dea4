from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation


class ListCustomerReservationsUseCase:
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
    async def list_customer_reservations(self, customer_id: int) -> List[Reservation]:
        return await self.reservation_query_repo.list_by_customer(customer_id=customer_id)
