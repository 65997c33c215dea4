from abc import ABC, abstractmethod
from typing import Optional

from src.service.restaurant.domain.entity.customer_entity import Customer


class ICustomerRepo(ABC):
    @abstractmethod
    async def create(self, *, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def get_by_id(self, *, customer_id: int) -> Optional[Customer]:
        pass
