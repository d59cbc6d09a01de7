from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.webinar_entity import Webinar


class IWebinarRepo(ABC):
    """Persistence port for webinars"""

    @abstractmethod
    async def find_by_id(self, webinar_id: str, *, for_update: bool = False) -> Optional[Webinar]:
        """
        Load a webinar by id

        Args:
            webinar_id: Webinar ID
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            Webinar entity or None if not found
        """
        pass

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """Insert a new webinar; a duplicate id is a store error"""
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored webinar with the same id

        Raises:
            RecordNotFoundError: no stored webinar has this id
        """
        pass
