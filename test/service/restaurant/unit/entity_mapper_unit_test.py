from datetime import datetime

import pytest

from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.model import CustomerModel, ReservationModel, TableModel
from src.service.restaurant.driven_adapter.model.entity_mapper import (
    customer_to_entity,
    reservation_to_entity,
    table_to_entity,
)


@pytest.mark.unit
class TestEntityMapper:
    def test_reservation_row_decodes_status_enum(self) -> None:
        row = ReservationModel(
            id=7,
            customer_id=1,
            table_id=2,
            reservation_time=datetime(2030, 1, 15, 19, 0),
            party_size=3,
            status='CANCELLED',
            special_requests=None,
            created_at=datetime(2030, 1, 10, 12, 0),
            updated_at=None,
        )

        reservation = reservation_to_entity(row)

        assert reservation.id == 7
        assert reservation.table_id == 2
        assert reservation.status is ReservationStatus.CANCELLED
        assert reservation.updated_at is None

    def test_table_row_decodes_location_and_status(self) -> None:
        row = TableModel(id=3, table_number=12, capacity=4, location='PATIO', status='MAINTENANCE')

        table = table_to_entity(row)

        assert (table.id, table.table_number, table.capacity) == (3, 12, 4)
        assert table.location is TableLocation.PATIO
        assert table.status is TableStatus.MAINTENANCE

    def test_customer_row(self) -> None:
        row = CustomerModel(id=5, name='Ada', email='ada@example.com', phone='')

        customer = customer_to_entity(row)

        assert customer.id == 5
        assert customer.email == 'ada@example.com'
        assert customer.created_at is None
