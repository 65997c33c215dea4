from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_customer_repo import ICustomerRepo
from src.service.restaurant.domain.entity.customer_entity import Customer


class GetCustomerUseCase:
    def __init__(self, customer_repo: ICustomerRepo):
        self.customer_repo = customer_repo

    @classmethod
    @inject
    def depends(
        cls, customer_repo: ICustomerRepo = Depends(Provide[Container.customer_repo])
    ) -> Self:
        return cls(customer_repo=customer_repo)

    @Logger.io
    async def get_customer(self, customer_id: int) -> Customer:
        customer = await self.customer_repo.get_by_id(customer_id=customer_id)

        if not customer:
            raise NotFoundError('Customer not found')

        return customer
