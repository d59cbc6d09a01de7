"""
Unit of Work Pattern

Architecture:
- UoW owns the session lifecycle for one transaction
- UoW is responsible for commit/rollback
- Repositories receive the shared session from the UoW
- Use cases read, validate and write through a single UoW block
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work

    Usage:
        async with uow:
            webinar = await uow.webinars.find_by_id(webinar_id, for_update=True)
            await uow.webinars.update(webinar.change_seats(seats))
            await uow.commit()

    Leaving the block without commit() rolls the transaction back.
    """

    webinars: IWebinarRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
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
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self._session_context: Optional[AsyncContextManager[AsyncSession]] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.webinar.driven_adapter.repo.webinar_repo_impl import WebinarRepoImpl

        self._session_context = self.session_factory()
        self.session = await self._session_context.__aenter__()
        self.webinars = WebinarRepoImpl(self.session)
        return await super().__aenter__()

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_context is not None:
                await self._session_context.__aexit__(*args)
            self._session_context = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'commit() called outside of the unit of work block'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
