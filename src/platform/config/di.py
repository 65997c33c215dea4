"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.restaurant.driven_adapter.repo.customer_repo_impl import CustomerRepoImpl
from src.service.restaurant.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.statistics_query_repo_impl import (
    StatisticsQueryRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.table_repo_impl import TableRepoImpl
from src.service.restaurant.driven_adapter.state.table_availability_query_handler_impl import (
    TableAvailabilityQueryHandlerImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from core_setting)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    table_repo = providers.Singleton(TableRepoImpl, session_factory=database.provided.session)
    customer_repo = providers.Singleton(
        CustomerRepoImpl, session_factory=database.provided.session
    )
    statistics_query_repo = providers.Singleton(
        StatisticsQueryRepoImpl, session_factory=database.provided.session
    )

    # Availability engine
    table_availability_query_handler = providers.Singleton(
        TableAvailabilityQueryHandlerImpl, session_factory=database.provided.session
    )

    # Strict booking mode: new UoW (own session) per command
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
