from typing import Iterable, Optional

from src.platform.exception.exceptions import RecordAlreadyExistsError, RecordNotFoundError
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar


_TABLE = 'webinar'


class InMemoryWebinarRepo(IWebinarRepo):
    """Dict-backed repository used by unit tests; mirrors WebinarRepoImpl error behavior"""

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: dict[str, Webinar] = {webinar.id: webinar for webinar in webinars}

    @property
    def webinars(self) -> list[Webinar]:
        return list(self._webinars.values())

    async def find_by_id(self, webinar_id: str, *, for_update: bool = False) -> Optional[Webinar]:
        return self._webinars.get(webinar_id)

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise RecordAlreadyExistsError(table=_TABLE, record_id=webinar.id)
        self._webinars[webinar.id] = webinar

    async def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise RecordNotFoundError(table=_TABLE, record_id=webinar.id)
        self._webinars[webinar.id] = webinar

    def snapshot(self) -> dict[str, Webinar]:
        return dict(self._webinars)

    def restore(self, snapshot: dict[str, Webinar]) -> None:
        self._webinars = dict(snapshot)
