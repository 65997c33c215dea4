from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.sql import func

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.driven_adapter.model.entity_mapper import reservation_to_entity
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


class ReservationCommandRepoImpl(SessionProvider, IReservationCommandRepo):
    @Logger.io
    async def create(self, *, reservation: Reservation) -> Reservation:
        async with self._get_session() as session:
            db_reservation = ReservationModel(
                customer_id=reservation.customer_id,
                table_id=reservation.table_id,
                reservation_time=reservation.reservation_time,
                party_size=reservation.party_size,
                status=reservation.status.value,
                special_requests=reservation.special_requests,
            )
            session.add(db_reservation)
            await self._commit(session)
            await session.refresh(db_reservation)

            return reservation_to_entity(db_reservation)

    @Logger.io
    async def get_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel).where(ReservationModel.id == reservation_id)
            )
            db_reservation = result.scalar_one_or_none()

            if not db_reservation:
                return None

            return reservation_to_entity(db_reservation)

    @Logger.io
    async def update(self, *, reservation: Reservation) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(ReservationModel)
                .where(ReservationModel.id == reservation.id)
                .values(
                    table_id=reservation.table_id,
                    reservation_time=reservation.reservation_time,
                    party_size=reservation.party_size,
                    special_requests=reservation.special_requests,
                    updated_at=func.now(),
                )
            )
            await self._commit(session)
            return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def cancel(self, *, reservation: Reservation) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(ReservationModel)
                .where(ReservationModel.id == reservation.id)
                .values(status=reservation.status.value, updated_at=func.now())
            )
            await self._commit(session)
            return result.rowcount > 0  # type: ignore[attr-defined]
