from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_customer_repo import ICustomerRepo
from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.driven_adapter.model.entity_mapper import customer_to_entity
from src.service.restaurant.driven_adapter.model.customer_model import CustomerModel
from src.service.restaurant.driven_adapter.session_provider import SessionProvider


class CustomerRepoImpl(SessionProvider, ICustomerRepo):
    @Logger.io
    async def create(self, *, customer: Customer) -> Customer:
        async with self._get_session() as session:
            db_customer = CustomerModel(
                name=customer.name,
                email=customer.email,
                phone=customer.phone,
            )
            session.add(db_customer)
            await self._commit(session)
            await session.refresh(db_customer)
            return customer_to_entity(db_customer)

    @Logger.io
    async def get_by_id(self, *, customer_id: int) -> Optional[Customer]:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.id == customer_id)
            )
            db_customer = result.scalar_one_or_none()
            return customer_to_entity(db_customer) if db_customer else None
