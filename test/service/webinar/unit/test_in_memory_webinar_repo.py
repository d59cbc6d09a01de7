import pytest

from src.platform.exception.exceptions import RecordAlreadyExistsError, RecordNotFoundError
from src.service.webinar.driven_adapter.repo.in_memory_unit_of_work import InMemoryUnitOfWork
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo
from test.shared.given import given_webinar
from test.util_constant import WEBINAR_ID


@pytest.mark.unit
class TestInMemoryWebinarRepo:
    @pytest.mark.asyncio
    async def test_find_by_id(self, webinar_repo: InMemoryWebinarRepo):
        assert await webinar_repo.find_by_id(WEBINAR_ID) == given_webinar()

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, webinar_repo: InMemoryWebinarRepo):
        assert await webinar_repo.find_by_id('not-existing') is None

    @pytest.mark.asyncio
    async def test_create_appends(self, webinar_repo: InMemoryWebinarRepo):
        other = given_webinar(id='id-2')

        await webinar_repo.create(other)

        assert [w.id for w in webinar_repo.webinars] == [WEBINAR_ID, 'id-2']

    @pytest.mark.asyncio
    async def test_create_duplicate_id_is_rejected(self, webinar_repo: InMemoryWebinarRepo):
        with pytest.raises(RecordAlreadyExistsError):
            await webinar_repo.create(given_webinar(title='Duplicate'))

    @pytest.mark.asyncio
    async def test_update_replaces_in_place(self, webinar_repo: InMemoryWebinarRepo):
        await webinar_repo.create(given_webinar(id='id-2'))

        await webinar_repo.update(given_webinar(seats=70))

        assert [w.id for w in webinar_repo.webinars] == [WEBINAR_ID, 'id-2']
        assert webinar_repo.webinars[0].seats == 70

    @pytest.mark.asyncio
    async def test_update_missing_record_raises(self, webinar_repo: InMemoryWebinarRepo):
        with pytest.raises(RecordNotFoundError, match='webinar record id-9 not found'):
            await webinar_repo.update(given_webinar(id='id-9'))

        assert len(webinar_repo.webinars) == 1


@pytest.mark.unit
class TestInMemoryUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_keeps_changes(self, uow: InMemoryUnitOfWork):
        async with uow:
            await uow.webinars.update(given_webinar(seats=80))
            await uow.commit()

        assert uow.committed is True
        assert (await uow.webinars.find_by_id(WEBINAR_ID)).seats == 80  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_leaving_without_commit_rolls_back(self, uow: InMemoryUnitOfWork):
        async with uow:
            await uow.webinars.update(given_webinar(seats=80))

        assert uow.committed is False
        assert (await uow.webinars.find_by_id(WEBINAR_ID)).seats == 50  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, uow: InMemoryUnitOfWork):
        with pytest.raises(RuntimeError):
            async with uow:
                await uow.webinars.create(given_webinar(id='id-2'))
                raise RuntimeError('boom')

        assert await uow.webinars.find_by_id('id-2') is None
