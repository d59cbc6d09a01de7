class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# Store-level signals raised by repository adapters (not domain decisions)


class RecordNotFoundError(NotFoundError):
    def __init__(self, *, table: str, record_id: str) -> None:
        self.table = table
        self.record_id = record_id
        super().__init__(f'{table} record {record_id} not found')


class RecordAlreadyExistsError(ConflictError):
    def __init__(self, *, table: str, record_id: str) -> None:
        self.table = table
        self.record_id = record_id
        super().__init__(f'{table} record {record_id} already exists')
