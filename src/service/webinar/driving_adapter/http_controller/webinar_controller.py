from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import WEBINAR_SEATS
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.webinar.driving_adapter.http_controller.schema.webinar_schema import (
    ChangeSeatsRequest,
    ChangeSeatsResponse,
)


router = APIRouter()


@router.post(WEBINAR_SEATS, status_code=status.HTTP_200_OK)
@Logger.io
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ChangeSeatsUseCase = Depends(ChangeSeatsUseCase.depends),
) -> ChangeSeatsResponse:
    await use_case.execute(user=current_user, webinar_id=webinar_id, seats=request.seats)
    return ChangeSeatsResponse(message='Seats updated')
