from abc import ABC, abstractmethod
from typing import List

from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.table_status import TableStatus


class ITableRepo(ABC):
    """Tables are provisioned out-of-band; only status is mutable here"""

    @abstractmethod
    async def list_all(self) -> List[Table]:
        """Ordered by table_number"""
        pass

    @abstractmethod
    async def update_status(self, *, table_id: int, status: TableStatus) -> bool:
        """False when the table does not exist"""
        pass
