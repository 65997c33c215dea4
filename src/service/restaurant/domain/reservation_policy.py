"""
Reservation Policy

Business-hour, party-size and turnover rules shared by the availability
engine and the reservation lifecycle. Pure domain logic, no infrastructure.
"""

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from src.platform.exception.exceptions import DomainError


MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 20

# Bookable hours, both ends inclusive (a 22:30 booking is accepted)
OPENING_HOUR = 9
LAST_BOOKING_HOUR = 22

# Hourly slots offered by the availability scan
FIRST_SLOT_HOUR = 9
LAST_SLOT_HOUR = 21

# Minimum seating duration; a table is blocked for bookings closer than this
TURNOVER_WINDOW = timedelta(minutes=120)


def validate_reservation_request(
    *,
    customer_id: int,
    party_size: int,
    reservation_time: Optional[datetime],
    now: Optional[datetime] = None,
) -> None:
    """
    Raises:
        DomainError: customer id, party size, time in the past or outside business hours
    """
    if customer_id <= 0:
        raise DomainError('Invalid reservation details: customer_id must be positive')
    if party_size < MIN_PARTY_SIZE or party_size > MAX_PARTY_SIZE:
        raise DomainError(
            f'Invalid reservation details: party_size must be between '
            f'{MIN_PARTY_SIZE} and {MAX_PARTY_SIZE}'
        )
    if reservation_time is None:
        raise DomainError('Invalid reservation details: reservation_time is required')

    now = now or datetime.now()
    if reservation_time <= now:
        raise DomainError('Invalid reservation details: reservation_time must be in the future')
    if reservation_time.hour < OPENING_HOUR or reservation_time.hour > LAST_BOOKING_HOUR:
        raise DomainError(
            f'Invalid reservation details: reservation hour must be between '
            f'{OPENING_HOUR}:00 and {LAST_BOOKING_HOUR}:59'
        )


def slot_times(day: date) -> List[datetime]:
    return [
        datetime.combine(day, time(hour=hour))
        for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1)
    ]


def turnover_bounds(reservation_time: datetime) -> tuple[datetime, datetime]:
    """Open interval of booking times that conflict with `reservation_time`."""
    return reservation_time - TURNOVER_WINDOW, reservation_time + TURNOVER_WINDOW
