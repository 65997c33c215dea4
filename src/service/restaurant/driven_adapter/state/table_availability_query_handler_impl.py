"""
Table Availability Query Handler

Best-fit table matching against the turnover window. A lookup is a single
SELECT: candidate tables minus those holding a CONFIRMED booking strictly
inside the window, tightest capacity first.
"""

import time
from datetime import date, datetime
from typing import List, Optional

from opentelemetry import trace
from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.restaurant.app.interface.i_table_availability_query_handler import (
    ITableAvailabilityQueryHandler,
)
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.domain.reservation_policy import slot_times, turnover_bounds
from src.service.restaurant.domain.value_object.time_slot import TimeSlot
from src.service.restaurant.driven_adapter.model.entity_mapper import table_to_entity
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.model.table_model import TableModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


class TableAvailabilityQueryHandlerImpl(SessionProvider, ITableAvailabilityQueryHandler):
    def __init__(self, session_factory=None) -> None:
        super().__init__(session_factory=session_factory)
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _build_lookup(
        *, party_size: int, reservation_time: datetime, exclude_reservation_id: Optional[int]
    ):
        window_start, window_end = turnover_bounds(reservation_time)

        blocked_tables = select(ReservationModel.table_id).where(
            ReservationModel.status == ReservationStatus.CONFIRMED.value,
            ReservationModel.reservation_time > window_start,
            ReservationModel.reservation_time < window_end,
        )
        if exclude_reservation_id is not None:
            blocked_tables = blocked_tables.where(ReservationModel.id != exclude_reservation_id)

        return (
            select(TableModel)
            .where(
                TableModel.capacity >= party_size,
                TableModel.status == TableStatus.AVAILABLE.value,
                TableModel.id.not_in(blocked_tables),
            )
            .order_by(TableModel.capacity.asc(), TableModel.id.asc())
            .limit(1)
        )

    @Logger.io
    async def find_available_table(
        self,
        *,
        party_size: int,
        reservation_time: datetime,
        exclude_reservation_id: Optional[int] = None,
    ) -> Optional[Table]:
        start = time.perf_counter()
        stmt = self._build_lookup(
            party_size=party_size,
            reservation_time=reservation_time,
            exclude_reservation_id=exclude_reservation_id,
        )

        async with self._get_session() as session:
            result = await session.execute(stmt)
            db_table = result.scalar_one_or_none()

        metrics.record_availability_lookup(
            found=db_table is not None, duration=time.perf_counter() - start
        )
        return table_to_entity(db_table) if db_table else None

    @Logger.io
    async def list_time_slots(self, *, day: date, party_size: int) -> List[TimeSlot]:
        with self.tracer.start_as_current_span(
            'availability.list_time_slots',
            attributes={'day': day.isoformat(), 'party_size': party_size},
        ):
            slots: List[TimeSlot] = []
            for slot_time in slot_times(day):
                table = await self.find_available_table(
                    party_size=party_size, reservation_time=slot_time
                )
                slots.append(
                    TimeSlot(
                        time=slot_time,
                        available=table is not None,
                        table_number=table.table_number if table else None,
                    )
                )

            available = sum(1 for slot in slots if slot.available)
            metrics.record_slot_scan(available=available, unavailable=len(slots) - available)
            return slots
