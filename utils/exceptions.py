class AppError(Exception):
    """Base class for errors that map onto a client-facing status/message pair."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404


class AlreadyExistsError(AppError):
    status_code = 400


class UnauthorizedError(AppError):
    status_code = 401


class InvalidInputError(AppError):
    status_code = 400


class InternalError(AppError):
    status_code = 500
