from typing import Optional

import attrs

from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus


@attrs.define
class Table:
    table_number: int
    capacity: int
    location: TableLocation = TableLocation.INDOOR
    status: TableStatus = TableStatus.AVAILABLE
    id: Optional[int] = None

    def can_seat(self, party_size: int) -> bool:
        return self.capacity >= party_size
