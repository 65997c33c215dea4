from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError, ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.reservation_policy import validate_reservation_request


@attrs.define
class Reservation:
    customer_id: int
    table_id: int
    reservation_time: datetime
    party_size: int
    status: ReservationStatus = ReservationStatus.CONFIRMED
    special_requests: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        customer_id: int,
        table: Table,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> 'Reservation':
        """
        Build a new CONFIRMED reservation bound to `table`.

        The id and timestamps are assigned by the store on insert.

        Raises:
            DomainError: invalid request or a table too small for the party
        """
        validate_reservation_request(
            customer_id=customer_id,
            party_size=party_size,
            reservation_time=reservation_time,
            now=now,
        )
        if table.id is None:
            raise DomainError('Cannot reserve an unsaved table')
        if not table.can_seat(party_size):
            raise DomainError(
                f'Table {table.table_number} seats {table.capacity}, party of {party_size}'
            )

        return cls(
            customer_id=customer_id,
            table_id=table.id,
            reservation_time=reservation_time,
            party_size=party_size,
            status=ReservationStatus.CONFIRMED,
            special_requests=special_requests,
        )

    def ensure_owned_by(self, customer_id: int) -> None:
        """
        Raises:
            ForbiddenError: when `customer_id` is not the booking customer
        """
        if self.customer_id != customer_id:
            raise ForbiddenError('Unauthorized')

    @Logger.io
    def reschedule(
        self,
        *,
        table: Table,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str],
    ) -> 'Reservation':
        """Move the booking to another table / time / party size (status is kept)."""
        if table.id is None or not table.can_seat(party_size):
            raise DomainError(f'Table {table.table_number} cannot seat party of {party_size}')

        return attrs.evolve(
            self,
            table_id=table.id,
            reservation_time=reservation_time,
            party_size=party_size,
            special_requests=special_requests,
            updated_at=datetime.now(),
        )

    @Logger.io
    def cancel(self) -> 'Reservation':
        # Re-cancelling is allowed and leaves the status CANCELLED
        return attrs.evolve(self, status=ReservationStatus.CANCELLED, updated_at=datetime.now())
