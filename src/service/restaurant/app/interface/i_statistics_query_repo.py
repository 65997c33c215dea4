from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from src.service.restaurant.domain.value_object.restaurant_statistics import RestaurantStatistics


class IStatisticsQueryRepo(ABC):
    @abstractmethod
    async def get_statistics(
        self,
        *,
        start_date: Optional[date],
        end_date: Optional[date],
        now: datetime,
    ) -> RestaurantStatistics:
        """
        Aggregate reservation counts

        Args:
            start_date: inclusive lower bound for total_reservations (ignored unless both given)
            end_date: inclusive upper bound for total_reservations (ignored unless both given)
            now: reference time for "active" and "today"
        """
        pass
