#!/usr/bin/env python3
"""
Database Reset Script

1. Drop & recreate every mapped table from the ORM metadata
2. Seed the default floor plan (tables are provisioned out-of-band)
3. Seed a demo customer

Usage:
    python -m scripts.reset_database
"""

import asyncio

from sqlalchemy import func, select

from src.platform.config.core_setting import settings
from src.platform.database.db_setting import Base, dispose_engine, get_engine, get_session_maker
from src.service.restaurant.domain.enum.table_location import TableLocation
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.model import CustomerModel, TableModel


# (table_number, capacity, location)
DEFAULT_FLOOR_PLAN: list[tuple[int, int, TableLocation]] = [
    (1, 2, TableLocation.INDOOR),
    (2, 2, TableLocation.INDOOR),
    (3, 4, TableLocation.INDOOR),
    (4, 4, TableLocation.INDOOR),
    (5, 4, TableLocation.PATIO),
    (6, 6, TableLocation.INDOOR),
    (7, 6, TableLocation.OUTDOOR),
    (8, 8, TableLocation.INDOOR),
    (9, 2, TableLocation.BAR),
    (10, 10, TableLocation.INDOOR),
]

DEMO_CUSTOMER = {'name': 'Demo Customer', 'email': 'demo@restaurant.example.com', 'phone': '555-0100'}


async def drop_and_recreate_schema() -> None:
    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    async with get_engine().begin() as conn:
        print('🗑️ Dropping tables...')
        await conn.run_sync(Base.metadata.drop_all)
        print('🏗️ Creating tables...')
        await conn.run_sync(Base.metadata.create_all)

    print('   ✅ Schema recreated')


async def seed_data() -> None:
    async with get_session_maker()() as session:
        try:
            print('Seeding floor plan...')
            session.add_all(
                TableModel(
                    table_number=number,
                    capacity=capacity,
                    location=location.value,
                    status=TableStatus.AVAILABLE.value,
                )
                for number, capacity, location in DEFAULT_FLOOR_PLAN
            )

            print('Seeding demo customer...')
            session.add(CustomerModel(**DEMO_CUSTOMER))

            await session.commit()
            print('✅ All data operations committed successfully!')

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back all operations: {e}')
            raise


async def verify_data() -> None:
    async with get_session_maker()() as session:
        table_count = (await session.execute(select(func.count(TableModel.id)))).scalar_one()
        customer_count = (await session.execute(select(func.count(CustomerModel.id)))).scalar_one()
        print(f'   Table count: {table_count}')
        print(f'   Customer count: {customer_count}')


async def main() -> None:
    print('Starting database reset...')
    print('=' * 50)

    try:
        await drop_and_recreate_schema()
        print()

        await seed_data()
        print()

        await verify_data()
        print()

        print('=' * 50)
        print('Database reset completed!')
        print(f'Demo customer: {DEMO_CUSTOMER["email"]}')
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
