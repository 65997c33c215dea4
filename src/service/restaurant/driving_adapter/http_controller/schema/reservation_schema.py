from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from src.service.restaurant.domain.enum.reservation_status import ReservationStatus


class ReservationRequest(BaseModel):
    customer_id: int
    reservation_time: datetime
    party_size: int
    special_requests: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'customer_id': 1,
                'reservation_time': '2030-01-15T19:00:00',
                'party_size': 4,
                'special_requests': 'Window seat',
            }
        }
    }

    @field_validator('reservation_time')
    @classmethod
    def to_restaurant_wall_clock(cls, value: datetime) -> datetime:
        # Reservation times are stored as naive local wall-clock
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class ReservationResponse(BaseModel):
    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': 12,
                'customer_id': 1,
                'table_id': 2,
                'reservation_time': '2030-01-15T19:00:00',
                'party_size': 4,
                'status': 'CONFIRMED',
                'special_requests': 'Window seat',
                'created_at': '2030-01-10T10:30:00',
                'updated_at': None,
            }
        },
    }

    id: int
    customer_id: int
    table_id: int
    reservation_time: datetime
    party_size: int
    status: ReservationStatus
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReservationResultResponse(BaseModel):
    success: bool
    message: str
    reservation: Optional[ReservationResponse] = None


class TimeSlotResponse(BaseModel):
    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {'time': '2030-01-15T19:00:00', 'available': True, 'table_number': 2}
        },
    }

    time: datetime
    available: bool
    table_number: Optional[int] = None
