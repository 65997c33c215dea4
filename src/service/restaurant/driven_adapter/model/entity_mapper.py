"""ORM row -> domain entity decoding shared by repositories and query handlers."""

from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.model.customer_model import CustomerModel
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.model.table_model import TableModel


def reservation_to_entity(db_reservation: ReservationModel) -> Reservation:
    return Reservation(
        id=db_reservation.id,
        customer_id=db_reservation.customer_id,
        table_id=db_reservation.table_id,
        reservation_time=db_reservation.reservation_time,
        party_size=db_reservation.party_size,
        status=ReservationStatus(db_reservation.status),
        special_requests=db_reservation.special_requests,
        created_at=db_reservation.created_at,
        updated_at=db_reservation.updated_at,
    )


def table_to_entity(db_table: TableModel) -> Table:
    return Table(
        id=db_table.id,
        table_number=db_table.table_number,
        capacity=db_table.capacity,
        location=TableLocation(db_table.location),
        status=TableStatus(db_table.status),
    )


def customer_to_entity(db_customer: CustomerModel) -> Customer:
    return Customer(
        id=db_customer.id,
        name=db_customer.name,
        email=db_customer.email,
        phone=db_customer.phone,
        created_at=db_customer.created_at,
    )
