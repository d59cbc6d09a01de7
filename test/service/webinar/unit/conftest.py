"""
Unit test configuration for the webinar service.

Use cases run against InMemoryUnitOfWork; nothing here touches the database
or the HTTP app.
"""

import pytest

from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.driven_adapter.repo.in_memory_unit_of_work import InMemoryUnitOfWork
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo
from test.shared.given import given_webinar


@pytest.fixture
def webinar_repo() -> InMemoryWebinarRepo:
    """Repository seeded with the default webinar (50 seats, organized by alice)"""
    return InMemoryWebinarRepo([given_webinar()])


@pytest.fixture
def uow(webinar_repo: InMemoryWebinarRepo) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(webinar_repo)


@pytest.fixture
def change_seats_use_case(uow: InMemoryUnitOfWork) -> ChangeSeatsUseCase:
    return ChangeSeatsUseCase(uow=uow)
