from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


SessionFactory = Callable[..., AsyncContextManager[AsyncSession]]


class SessionProvider:
    """
    Session access shared by repositories and the availability handler.

    Standalone: every call opens its own session from session_factory and commits it.
    Unit of Work: the UoW injects `session`; commit/rollback belong to the UoW.
    """

    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    async def _commit(self, session: AsyncSession) -> None:
        if self.session is None:
            await session.commit()
        else:
            await session.flush()
