# FILE: intern_registry/errors.py
# Scop:
#   - Erori tipizate ridicate din services / deps.
#   - main.py transformă orice AppError în {"message": ...} cu status code-ul lui.
#
# Regulă:
#   - message e ce vede clientul; detaliile interne merg doar în log.

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class ServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
