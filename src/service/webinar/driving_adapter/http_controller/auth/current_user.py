from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.di import Container
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


AUTH_COOKIE_NAME = 'fastapiusersauth'


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(' ')
    if scheme.lower() != 'bearer' or not credentials:
        return None
    return credentials.strip()


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    authorization: Optional[str] = Header(None),
    token: Optional[str] = Cookie(None, alias=AUTH_COOKIE_NAME),
) -> UserEntity:
    """Resolve the acting user from a Bearer header, falling back to the auth cookie"""
    return jwt_auth.get_current_user_info_from_jwt(_bearer_token(authorization) or token)
