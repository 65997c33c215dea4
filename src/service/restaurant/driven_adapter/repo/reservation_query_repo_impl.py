from datetime import date, datetime, time, timedelta
from typing import List

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.driven_adapter.model.entity_mapper import reservation_to_entity
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


class ReservationQueryRepoImpl(SessionProvider, IReservationQueryRepo):
    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[Reservation]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(ReservationModel.customer_id == customer_id)
                .order_by(ReservationModel.reservation_time.desc(), ReservationModel.id.desc())
            )
            return [reservation_to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_all(self) -> List[Reservation]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel).order_by(
                    ReservationModel.reservation_time.desc(), ReservationModel.id.desc()
                )
            )
            return [reservation_to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_by_date(self, *, day: date) -> List[Reservation]:
        # Half-open day range keeps the reservation_time index usable
        day_start = datetime.combine(day, time.min)
        day_end = day_start + timedelta(days=1)
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(
                    ReservationModel.reservation_time >= day_start,
                    ReservationModel.reservation_time < day_end,
                )
                .order_by(ReservationModel.reservation_time.asc(), ReservationModel.id.asc())
            )
            return [reservation_to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_by_status(self, *, status: ReservationStatus) -> List[Reservation]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(ReservationModel.status == status.value)
                .order_by(ReservationModel.reservation_time.asc(), ReservationModel.id.asc())
            )
            return [reservation_to_entity(row) for row in result.scalars().all()]
