"""
Table Availability Query Handler Interface

The availability engine: decides whether a table can serve a party at a given
time and projects a day's worth of hourly slots.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional

from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.value_object.time_slot import TimeSlot


class ITableAvailabilityQueryHandler(ABC):
    @abstractmethod
    async def find_available_table(
        self,
        *,
        party_size: int,
        reservation_time: datetime,
        exclude_reservation_id: Optional[int] = None,
    ) -> Optional[Table]:
        """
        Best-fit table for the party

        Candidates: capacity >= party_size, status AVAILABLE, and no CONFIRMED
        reservation (other than exclude_reservation_id) strictly within the
        turnover window of reservation_time. Smallest capacity wins, lowest
        table id breaks ties.

        Returns:
            The chosen table, or None when no candidate survives
        """
        pass

    @abstractmethod
    async def list_time_slots(self, *, day: date, party_size: int) -> List[TimeSlot]:
        """One independently evaluated slot per hour from 09:00 to 21:00"""
        pass
