from datetime import datetime

import pytest

from src.platform.exception.exceptions import DomainError, ForbiddenError
from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus


@pytest.mark.unit
class TestReservationCreate:
    def test_create_binds_table_and_starts_confirmed(
        self, table_for_four: Table, dinner_time: datetime, now: datetime
    ) -> None:
        reservation = Reservation.create(
            customer_id=1,
            table=table_for_four,
            reservation_time=dinner_time,
            party_size=4,
            special_requests='Window',
            now=now,
        )

        assert reservation.table_id == table_for_four.id
        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.id is None
        assert reservation.special_requests == 'Window'

    def test_create_rejects_table_too_small(self, dinner_time: datetime, now: datetime) -> None:
        with pytest.raises(DomainError):
            Reservation.create(
                customer_id=1,
                table=Table(id=1, table_number=1, capacity=2),
                reservation_time=dinner_time,
                party_size=3,
                now=now,
            )

    def test_create_rejects_unsaved_table(self, dinner_time: datetime, now: datetime) -> None:
        with pytest.raises(DomainError, match='unsaved'):
            Reservation.create(
                customer_id=1,
                table=Table(table_number=1, capacity=4),
                reservation_time=dinner_time,
                party_size=2,
                now=now,
            )


@pytest.mark.unit
class TestReservationLifecycle:
    def test_ensure_owned_by_rejects_other_customer(
        self, confirmed_reservation: Reservation
    ) -> None:
        with pytest.raises(ForbiddenError, match='Unauthorized'):
            confirmed_reservation.ensure_owned_by(99)

    def test_ensure_owned_by_accepts_owner(self, confirmed_reservation: Reservation) -> None:
        confirmed_reservation.ensure_owned_by(confirmed_reservation.customer_id)

    def test_reschedule_overwrites_booking_details_and_keeps_status(
        self, confirmed_reservation: Reservation
    ) -> None:
        bigger_table = Table(id=3, table_number=20, capacity=6)
        new_time = datetime(2030, 1, 16, 20, 0)

        moved = confirmed_reservation.reschedule(
            table=bigger_table, reservation_time=new_time, party_size=6, special_requests=None
        )

        assert moved.table_id == 3
        assert moved.reservation_time == new_time
        assert moved.party_size == 6
        assert moved.special_requests is None
        assert moved.status == ReservationStatus.CONFIRMED
        assert moved.id == confirmed_reservation.id
        assert moved.updated_at is not None

    def test_cancel_twice_stays_cancelled(self, confirmed_reservation: Reservation) -> None:
        cancelled = confirmed_reservation.cancel().cancel()

        assert cancelled.status == ReservationStatus.CANCELLED


@pytest.mark.unit
class TestCustomerCreate:
    def test_create_strips_fields(self) -> None:
        customer = Customer.create(name='  Ada ', email=' ada@example.com ', phone=' 555 ')

        assert customer.name == 'Ada'
        assert customer.email == 'ada@example.com'
        assert customer.phone == '555'

    def test_blank_name_is_rejected(self) -> None:
        with pytest.raises(DomainError, match='name'):
            Customer.create(name='   ', email='ada@example.com')
