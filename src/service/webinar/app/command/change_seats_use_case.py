from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_exceptions import (
    WebinarNotFoundError,
    WebinarNotOrganizerError,
)


class ChangeSeatsUseCase:
    """
    Change the seat capacity of a webinar.

    Flow (order matters, each step fails fast):
    1. Load the webinar (row locked) -> WebinarNotFoundError
    2. Check the user organizes it -> WebinarNotOrganizerError
    3. Apply the new capacity -> WebinarReduceSeatsError / WebinarTooManySeatsError
    4. Persist and commit

    Steps 1-4 share one transaction, so a failure leaves the stored webinar untouched
    and concurrent requests for the same webinar are serialized by the row lock.
    """

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, user: UserEntity, webinar_id: str, seats: int) -> Webinar:
        async with self.uow:
            webinar = await self.uow.webinars.find_by_id(webinar_id, for_update=True)
            if webinar is None:
                raise WebinarNotFoundError()

            if not webinar.is_organizer(user):
                raise WebinarNotOrganizerError()

            updated_webinar = webinar.change_seats(seats)

            await self.uow.webinars.update(updated_webinar)
            await self.uow.commit()

        Logger.base.info(
            f'💺 [CHANGE_SEATS] Webinar {webinar_id} seats {webinar.seats} -> {updated_webinar.seats}'
        )
        return updated_webinar
