from src.service.restaurant.app.interface.i_customer_repo import ICustomerRepo
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.app.interface.i_statistics_query_repo import IStatisticsQueryRepo
from src.service.restaurant.app.interface.i_table_availability_query_handler import (
    ITableAvailabilityQueryHandler,
)
from src.service.restaurant.app.interface.i_table_repo import ITableRepo

__all__ = [
    'ICustomerRepo',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
    'IStatisticsQueryRepo',
    'ITableAvailabilityQueryHandler',
    'ITableRepo',
]
