"""
Integration fixtures for the restaurant service.

Rows are inserted straight through the ORM so each test controls ids and
timestamps exactly; the schema is recreated by `clean_database` first.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Optional

import pytest

from src.platform.database.db_setting import Database, get_session_maker
from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.model import CustomerModel, ReservationModel, TableModel
from src.service.restaurant.driven_adapter.model.entity_mapper import (
    customer_to_entity,
    reservation_to_entity,
    table_to_entity,
)


SeedTables = Callable[..., Awaitable[list[Table]]]
SeedReservation = Callable[..., Awaitable[Reservation]]


@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
async def seed_tables(clean_database: None) -> SeedTables:
    """Insert tables in order; ids are 1..n on a fresh schema."""

    async def _seed(
        capacities: list[int], statuses: Optional[list[TableStatus]] = None
    ) -> list[Table]:
        statuses = statuses or [TableStatus.AVAILABLE] * len(capacities)
        async with get_session_maker()() as session:
            models = [
                TableModel(
                    table_number=index + 1,
                    capacity=capacity,
                    location='INDOOR',
                    status=status.value,
                )
                for index, (capacity, status) in enumerate(zip(capacities, statuses))
            ]
            session.add_all(models)
            await session.commit()
            return [table_to_entity(model) for model in models]

    return _seed


@pytest.fixture
async def floor_plan(seed_tables: SeedTables) -> list[Table]:
    """tables = [{id=1,cap=2},{id=2,cap=4},{id=3,cap=6}]"""
    return await seed_tables([2, 4, 6])


@pytest.fixture
async def customer(clean_database: None) -> Customer:
    async with get_session_maker()() as session:
        model = CustomerModel(name='Ada Lovelace', email='ada@example.com', phone='555-0100')
        session.add(model)
        await session.commit()
        await session.refresh(model)
        return customer_to_entity(model)


@pytest.fixture
async def other_customer(clean_database: None) -> Customer:
    async with get_session_maker()() as session:
        model = CustomerModel(name='Grace Hopper', email='grace@example.com', phone='')
        session.add(model)
        await session.commit()
        await session.refresh(model)
        return customer_to_entity(model)


@pytest.fixture
async def seed_reservation(customer: Customer) -> SeedReservation:
    async def _seed(
        *,
        table_id: int,
        reservation_time: datetime,
        party_size: int = 2,
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        customer_id: Optional[int] = None,
    ) -> Reservation:
        async with get_session_maker()() as session:
            model = ReservationModel(
                customer_id=customer_id or customer.id,
                table_id=table_id,
                reservation_time=reservation_time,
                party_size=party_size,
                status=status.value,
            )
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return reservation_to_entity(model)

    return _seed
