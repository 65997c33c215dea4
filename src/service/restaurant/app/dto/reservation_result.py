"""Reservation command result DTO."""

from typing import Optional

import attrs

from src.service.restaurant.domain.entity.reservation_entity import Reservation


@attrs.define(frozen=True)
class ReservationResult:
    """
    Outcome of a create / modify / cancel command.

    "No tables available" is a normal outcome (success=False), never an exception.
    """

    success: bool
    message: str
    reservation: Optional[Reservation] = None

    @classmethod
    def ok(cls, message: str, reservation: Optional[Reservation] = None) -> 'ReservationResult':
        return cls(success=True, message=message, reservation=reservation)

    @classmethod
    def unavailable(cls, message: str = 'No tables available') -> 'ReservationResult':
        return cls(success=False, message=message, reservation=None)
