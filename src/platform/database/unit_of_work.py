"""
Unit of Work Pattern - one SERIALIZABLE transaction for check-then-write

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories and the availability handler get the shared session injected
- Use cases in strict booking mode run the availability check and the write
  inside one UoW, so a concurrent double booking fails to serialize instead of
  being committed
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.restaurant.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )
    from src.service.restaurant.app.interface.i_table_availability_query_handler import (
        ITableAvailabilityQueryHandler,
    )


SERIALIZATION_FAILURE_SQLSTATE = '40001'


def is_serialization_failure(error: BaseException) -> bool:
    if not isinstance(error, DBAPIError):
        return False
    orig = error.orig
    code = getattr(orig, 'sqlstate', None) or getattr(orig, 'pgcode', None)
    return code == SERIALIZATION_FAILURE_SQLSTATE or 'could not serialize' in str(orig)


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            table = await uow.table_availability_query_handler.find_available_table(...)
            reservation = await uow.reservation_command_repo.create(...)
            await uow.commit()
    """

    reservation_command_repo: IReservationCommandRepo
    table_availability_query_handler: ITableAvailabilityQueryHandler

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        # No-op after a successful commit
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        isolation_level: str = 'SERIALIZABLE',
    ) -> None:
        self.session_factory = session_factory
        self.isolation_level = isolation_level
        self._session_context: Optional[AbstractAsyncContextManager[AsyncSession]] = None
        self.session: AsyncSession

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.restaurant.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.restaurant.driven_adapter.state.table_availability_query_handler_impl import (
            TableAvailabilityQueryHandlerImpl,
        )

        self._session_context = self.session_factory()
        self.session = await self._session_context.__aenter__()
        # Isolation level must be set before the first statement of the transaction
        await self.session.connection(execution_options={'isolation_level': self.isolation_level})

        self.reservation_command_repo = ReservationCommandRepoImpl()
        self.reservation_command_repo.session = self.session
        self.table_availability_query_handler = TableAvailabilityQueryHandlerImpl()
        self.table_availability_query_handler.session = self.session

        return await super().__aenter__()

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            if self._session_context is not None:
                await self._session_context.__aexit__(exc_type, exc, tb)
                self._session_context = None

        if exc is not None and is_serialization_failure(exc):
            Logger.base.warning(f'🔁 [UOW] Serialization failure: {exc}')
            raise ConflictError('Reservation conflicted with a concurrent booking') from exc

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except DBAPIError as e:
            if is_serialization_failure(e):
                Logger.base.warning(f'🔁 [UOW] Serialization failure on commit: {e}')
                raise ConflictError('Reservation conflicted with a concurrent booking') from e
            raise

    async def rollback(self) -> None:
        await self.session.rollback()
