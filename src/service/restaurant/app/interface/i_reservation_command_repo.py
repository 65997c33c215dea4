"""
Reservation Command Repository Interface

Single-row writes on the reservations table. Each call is atomic on its own;
no multi-row transaction is required.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.restaurant.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, reservation: Reservation) -> Reservation:
        """
        Insert a reservation

        Returns:
            Reservation with store-assigned id and timestamps
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        """Returns None when the reservation does not exist"""
        pass

    @abstractmethod
    async def update(self, *, reservation: Reservation) -> bool:
        """
        Overwrite table, time, party size and special requests

        Returns:
            False when no row matched reservation.id
        """
        pass

    @abstractmethod
    async def cancel(self, *, reservation: Reservation) -> bool:
        """Persist the cancelled status of reservation.id; False when no row matched"""
        pass
