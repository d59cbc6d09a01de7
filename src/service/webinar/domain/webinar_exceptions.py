"""Webinar domain errors, one class per rejected rule."""

from src.platform.exception.exceptions import AuthenticationError, DomainError, NotFoundError


class WebinarNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Webinar not found') -> None:
        super().__init__(message)


class WebinarNotOrganizerError(AuthenticationError):
    def __init__(self, message: str = 'User is not allowed to update this webinar') -> None:
        super().__init__(message)


class WebinarReduceSeatsError(DomainError):
    def __init__(self, message: str = 'You cannot reduce the number of seats') -> None:
        super().__init__(message, 400)


class WebinarTooManySeatsError(DomainError):
    def __init__(self, message: str = 'Webinar must have at most 1000 seats') -> None:
        super().__init__(message, 400)
