from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over InMemoryWebinarRepo; rollback restores the state seen on entry"""

    def __init__(self, webinars: Optional[InMemoryWebinarRepo] = None) -> None:
        self.webinars: InMemoryWebinarRepo = webinars or InMemoryWebinarRepo()
        self.committed = False
        self._snapshot: dict[str, Webinar] = {}

    async def __aenter__(self) -> AbstractUnitOfWork:
        self._snapshot = self.webinars.snapshot()
        return await super().__aenter__()

    async def _commit(self) -> None:
        self._snapshot = self.webinars.snapshot()
        self.committed = True

    async def rollback(self) -> None:
        self.webinars.restore(self._snapshot)
