import asyncio
from typing import Optional

from fastapi.testclient import TestClient
from httpx import Response

from src.platform.config.di import container
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


def auth_headers(user: UserEntity) -> dict[str, str]:
    token = JwtAuth().create_jwt_token(user)
    return {'Authorization': f'Bearer {token}'}


def change_seats(
    client: TestClient, webinar_id: str, seats: int, user: Optional[UserEntity] = None
) -> Response:
    headers = auth_headers(user) if user else {}
    return client.post(f'/webinars/{webinar_id}/seats', json={'seats': seats}, headers=headers)


def save_webinar(webinar: Webinar) -> None:
    async def _run() -> None:
        async with container.unit_of_work() as uow:
            await uow.webinars.create(webinar)
            await uow.commit()

    asyncio.run(_run())


def load_webinar(webinar_id: str) -> Optional[Webinar]:
    async def _run() -> Optional[Webinar]:
        async with container.unit_of_work() as uow:
            return await uow.webinars.find_by_id(webinar_id)

    return asyncio.run(_run())
