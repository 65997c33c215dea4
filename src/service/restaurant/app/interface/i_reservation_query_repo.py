from abc import ABC, abstractmethod
from datetime import date
from typing import List

from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus


class IReservationQueryRepo(ABC):
    """Repository interface for reservation read operations"""

    @abstractmethod
    async def list_by_customer(self, *, customer_id: int) -> List[Reservation]:
        """Newest reservation time first"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Reservation]:
        """Newest reservation time first"""
        pass

    @abstractmethod
    async def list_by_date(self, *, day: date) -> List[Reservation]:
        """Earliest reservation time first"""
        pass

    @abstractmethod
    async def list_by_status(self, *, status: ReservationStatus) -> List[Reservation]:
        """Earliest reservation time first"""
        pass
