from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_customer_repo import ICustomerRepo
from src.service.restaurant.domain.entity.customer_entity import Customer


class CreateCustomerUseCase:
    def __init__(self, *, customer_repo: ICustomerRepo) -> None:
        self.customer_repo = customer_repo

    @classmethod
    @inject
    def depends(
        cls, customer_repo: ICustomerRepo = Depends(Provide[Container.customer_repo])
    ) -> Self:
        return cls(customer_repo=customer_repo)

    @Logger.io
    async def create_customer(self, *, name: str, email: str, phone: str = '') -> Customer:
        customer = Customer.create(name=name, email=email, phone=phone)
        return await self.customer_repo.create(customer=customer)
