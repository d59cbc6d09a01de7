from datetime import datetime

import attrs

from src.platform.config.business_config import WebinarLimits
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.webinar_exceptions import (
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)


def validate_not_blank(instance, attribute, value):
    if not value or not value.strip():
        raise DomainError(f'Webinar {attribute.name} is required')


def validate_positive_seats(instance, attribute, value):
    if isinstance(value, bool) or value < WebinarLimits.MIN_SEATS:
        raise DomainError('Webinar seats must be a positive integer')


def validate_end_after_start(instance, attribute, value):
    if value < instance.start_date:
        raise DomainError('Webinar end_date must not be before start_date')


@attrs.define(frozen=True)
class Webinar:
    id: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    organizer_id: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_not_blank]
    )
    title: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    start_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    end_date: datetime = attrs.field(
        validator=[attrs.validators.instance_of(datetime), validate_end_after_start]
    )
    seats: int = attrs.field(validator=[attrs.validators.instance_of(int), validate_positive_seats])

    def is_organizer(self, user: UserEntity) -> bool:
        return self.organizer_id == user.id

    def has_too_many_seats(self) -> bool:
        return self.seats > WebinarLimits.MAX_SEATS

    @Logger.io
    def change_seats(self, seats: int) -> 'Webinar':
        """
        Return a copy of the webinar with the new capacity

        Raises:
            WebinarReduceSeatsError: seats is not strictly greater than the current capacity
            WebinarTooManySeatsError: seats exceeds WebinarLimits.MAX_SEATS
        """
        if seats <= self.seats:
            raise WebinarReduceSeatsError()

        updated = attrs.evolve(self, seats=seats)
        if updated.has_too_many_seats():
            raise WebinarTooManySeatsError()

        return updated
