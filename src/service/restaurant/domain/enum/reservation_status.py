"""Reservation Status Enum"""

from enum import StrEnum


class ReservationStatus(StrEnum):
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'
    COMPLETED = 'COMPLETED'
