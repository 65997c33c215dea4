import pytest

from src.platform.database.db_setting import Database
from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.repo.customer_repo_impl import CustomerRepoImpl
from src.service.restaurant.driven_adapter.repo.table_repo_impl import TableRepoImpl


@pytest.fixture
def table_repo(database: Database) -> TableRepoImpl:
    return TableRepoImpl(session_factory=database.session)


@pytest.fixture
def customer_repo(database: Database) -> CustomerRepoImpl:
    return CustomerRepoImpl(session_factory=database.session)


@pytest.mark.integration
class TestTableRepo:
    @pytest.mark.asyncio
    async def test_list_all_ordered_by_table_number(
        self, table_repo: TableRepoImpl, seed_tables
    ) -> None:
        await seed_tables([6, 2, 4])

        tables = await table_repo.list_all()

        assert [t.table_number for t in tables] == [1, 2, 3]
        assert [t.capacity for t in tables] == [6, 2, 4]
        assert all(t.status == TableStatus.AVAILABLE for t in tables)

    @pytest.mark.asyncio
    async def test_update_status_persists(self, table_repo: TableRepoImpl, seed_tables) -> None:
        await seed_tables([4])

        updated = await table_repo.update_status(table_id=1, status=TableStatus.MAINTENANCE)

        assert updated is True
        [table] = await table_repo.list_all()
        assert table.status == TableStatus.MAINTENANCE

    @pytest.mark.asyncio
    async def test_update_status_unknown_table_returns_false(
        self, table_repo: TableRepoImpl, seed_tables
    ) -> None:
        await seed_tables([4])

        assert await table_repo.update_status(table_id=99, status=TableStatus.OCCUPIED) is False
        assert [t.status for t in await table_repo.list_all()] == [TableStatus.AVAILABLE]


@pytest.mark.integration
class TestCustomerRepo:
    @pytest.mark.asyncio
    async def test_create_and_get(self, customer_repo: CustomerRepoImpl) -> None:
        created = await customer_repo.create(
            customer=Customer.create(name='Alan Turing', email='alan@example.com', phone='555-0199')
        )

        assert created.id is not None
        assert created.created_at is not None

        fetched = await customer_repo.get_by_id(customer_id=created.id)
        assert fetched is not None
        assert fetched.name == 'Alan Turing'
        assert fetched.email == 'alan@example.com'
        assert fetched.phone == '555-0199'

    @pytest.mark.asyncio
    async def test_get_unknown_customer_returns_none(
        self, customer_repo: CustomerRepoImpl
    ) -> None:
        assert await customer_repo.get_by_id(customer_id=42) is None
