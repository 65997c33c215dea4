from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus

__all__ = ['ReservationStatus', 'TableLocation', 'TableStatus']
