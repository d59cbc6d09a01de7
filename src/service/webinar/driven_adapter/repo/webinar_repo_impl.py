from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import RecordNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class WebinarRepoImpl(IWebinarRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_webinar: WebinarModel) -> Webinar:
        return Webinar(
            id=db_webinar.id,
            organizer_id=db_webinar.organizer_id,
            title=db_webinar.title,
            start_date=_as_utc(db_webinar.start_date),
            end_date=_as_utc(db_webinar.end_date),
            seats=db_webinar.seats,
        )

    @Logger.io
    async def find_by_id(self, webinar_id: str, *, for_update: bool = False) -> Optional[Webinar]:
        stmt = select(WebinarModel).where(WebinarModel.id == webinar_id)
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        db_webinar = result.scalar_one_or_none()

        if not db_webinar:
            return None

        return WebinarRepoImpl._to_entity(db_webinar)

    @Logger.io
    async def create(self, webinar: Webinar) -> None:
        db_webinar = WebinarModel(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title=webinar.title,
            start_date=webinar.start_date,
            end_date=webinar.end_date,
            seats=webinar.seats,
        )
        self.session.add(db_webinar)
        await self.session.flush()

    @Logger.io
    async def update(self, webinar: Webinar) -> None:
        stmt = (
            sql_update(WebinarModel)
            .where(WebinarModel.id == webinar.id)
            .values(
                title=webinar.title,
                start_date=webinar.start_date,
                end_date=webinar.end_date,
                seats=webinar.seats,
            )
            .execution_options(synchronize_session=False)
        )

        result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise RecordNotFoundError(table=WebinarModel.__tablename__, record_id=webinar.id)
