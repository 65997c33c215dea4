from pydantic import BaseModel

from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus


class TableResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: int
    table_number: int
    capacity: int
    location: TableLocation
    status: TableStatus


class TableStatusUpdateRequest(BaseModel):
    status: TableStatus

    class Config:
        json_schema_extra = {'example': {'status': 'MAINTENANCE'}}
