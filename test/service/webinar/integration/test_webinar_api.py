from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.platform.constant.route_constant import HEALTH
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo
from test.shared.given import ORGANIZER, OTHER_USER, given_webinar
from test.shared.then import (
    then_error_response_should_be,
    then_webinar_seats_should_be,
    then_webinar_should_remain_unchanged,
)
from test.shared.utils import auth_headers, change_seats, load_webinar, save_webinar
from test.util_constant import WEBINAR_ID


class BrokenUnitOfWork(AbstractUnitOfWork):
    """Fails on entry, standing in for a lost database connection"""

    def __init__(self) -> None:
        self.webinars = InMemoryWebinarRepo()

    async def __aenter__(self) -> AbstractUnitOfWork:
        raise RuntimeError('database is gone')

    async def _commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


@pytest.mark.integration
class TestChangeSeatsAPI:
    def test_organizer_changes_seats(self, client: TestClient):
        save_webinar(given_webinar())

        response = change_seats(client, WEBINAR_ID, 100, user=ORGANIZER)

        assert response.status_code == 200
        assert response.json() == {'message': 'Seats updated'}
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 100)

    def test_token_from_cookie(self, client: TestClient):
        save_webinar(given_webinar())
        token = auth_headers(ORGANIZER)['Authorization'].removeprefix('Bearer ')
        client.cookies.set('fastapiusersauth', token)

        response = client.post(f'/webinars/{WEBINAR_ID}/seats', json={'seats': 60})

        assert response.status_code == 200
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 60)

    def test_webinar_not_found(self, client: TestClient):
        response = change_seats(client, 'not-existing', 100, user=ORGANIZER)

        then_error_response_should_be(response, 404, 'Webinar not found')

    def test_not_organizer(self, client: TestClient):
        save_webinar(given_webinar())

        response = change_seats(client, WEBINAR_ID, 100, user=OTHER_USER)

        then_error_response_should_be(response, 401, 'User is not allowed to update this webinar')
        then_webinar_should_remain_unchanged(load_webinar(WEBINAR_ID), given_webinar())

    def test_reduce_seats(self, client: TestClient):
        save_webinar(given_webinar())

        response = change_seats(client, WEBINAR_ID, 49, user=ORGANIZER)

        then_error_response_should_be(response, 400, 'You cannot reduce the number of seats')
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 50)

    def test_too_many_seats(self, client: TestClient):
        save_webinar(given_webinar())

        response = change_seats(client, WEBINAR_ID, 1001, user=ORGANIZER)

        then_error_response_should_be(response, 400, 'Webinar must have at most 1000 seats')
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 50)

    def test_repeated_request_is_rejected(self, client: TestClient):
        save_webinar(given_webinar())

        first = change_seats(client, WEBINAR_ID, 100, user=ORGANIZER)
        second = change_seats(client, WEBINAR_ID, 100, user=ORGANIZER)

        assert first.status_code == 200
        then_error_response_should_be(second, 400, 'You cannot reduce the number of seats')
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 100)


@pytest.mark.integration
class TestChangeSeatsAPIRequestHandling:
    def test_missing_credentials(self, client: TestClient):
        save_webinar(given_webinar())

        response = change_seats(client, WEBINAR_ID, 100)

        then_error_response_should_be(response, 401, 'Not authenticated')
        then_webinar_seats_should_be(load_webinar(WEBINAR_ID), 50)

    def test_invalid_token(self, client: TestClient):
        response = client.post(
            f'/webinars/{WEBINAR_ID}/seats',
            json={'seats': 100},
            headers={'Authorization': 'Bearer not-a-jwt'},
        )

        then_error_response_should_be(response, 401, 'Invalid token')

    @pytest.mark.parametrize('body', [{}, {'seats': 'many'}, {'seats': 10.5}])
    def test_malformed_body(self, client: TestClient, body: dict):
        response = client.post(
            f'/webinars/{WEBINAR_ID}/seats', json=body, headers=auth_headers(ORGANIZER)
        )

        assert response.status_code == 400
        data = response.json()
        assert data['error'] == 'Invalid request'
        assert data['detail']

    def test_unexpected_failure_returns_500(self, client: TestClient):
        with container.unit_of_work.override(providers.Factory(BrokenUnitOfWork)):
            response = change_seats(client, WEBINAR_ID, 100, user=ORGANIZER)

        then_error_response_should_be(response, 500, 'Internal server error')


@pytest.mark.integration
def test_health(client: TestClient):
    response = client.get(HEALTH)

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
