from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy import func, select

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_statistics_query_repo import IStatisticsQueryRepo
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.reservation_policy import FIRST_SLOT_HOUR, LAST_SLOT_HOUR
from src.service.restaurant.domain.value_object.restaurant_statistics import RestaurantStatistics
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.model.table_model import TableModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


SLOTS_PER_DAY = LAST_SLOT_HOUR - FIRST_SLOT_HOUR + 1


def _day_range(first: date, last: date) -> tuple[datetime, datetime]:
    start = datetime.combine(first, time.min)
    return start, datetime.combine(last, time.min) + timedelta(days=1)


class StatisticsQueryRepoImpl(SessionProvider, IStatisticsQueryRepo):
    @Logger.io
    async def get_statistics(
        self,
        *,
        start_date: Optional[date],
        end_date: Optional[date],
        now: datetime,
    ) -> RestaurantStatistics:
        confirmed = ReservationModel.status == ReservationStatus.CONFIRMED.value

        total_stmt = select(func.count(ReservationModel.id))
        if start_date is not None and end_date is not None:
            range_start, range_end = _day_range(start_date, end_date)
            total_stmt = total_stmt.where(
                ReservationModel.reservation_time >= range_start,
                ReservationModel.reservation_time < range_end,
            )

        today_start, today_end = _day_range(now.date(), now.date())

        async with self._get_session() as session:
            total = (await session.execute(total_stmt)).scalar_one()
            active = (
                await session.execute(
                    select(func.count(ReservationModel.id)).where(
                        confirmed, ReservationModel.reservation_time > now
                    )
                )
            ).scalar_one()
            average = (
                await session.execute(select(func.avg(ReservationModel.party_size)).where(confirmed))
            ).scalar_one()
            booked_today = (
                await session.execute(
                    select(func.count(ReservationModel.id)).where(
                        confirmed,
                        ReservationModel.reservation_time >= today_start,
                        ReservationModel.reservation_time < today_end,
                    )
                )
            ).scalar_one()
            table_count = (await session.execute(select(func.count(TableModel.id)))).scalar_one()

        utilization = booked_today * 100.0 / (table_count * SLOTS_PER_DAY) if table_count else 0.0

        return RestaurantStatistics(
            total_reservations=int(total),
            active_reservations=int(active),
            average_party_size=float(average) if average is not None else 0.0,
            table_utilization=float(utilization),
        )
