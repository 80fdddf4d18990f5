# app/domain/errors.py
from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE_CORRUPT = "storage_corrupt"


class RepositoryError(Exception):
    """
    Base error raised by stores and repositories.
    The HTTP layer picks the response status from `kind`.
    """

    kind: ErrorKind = ErrorKind.STORAGE_CORRUPT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RepositoryError):
    kind = ErrorKind.VALIDATION


class NotFoundError(RepositoryError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(RepositoryError):
    kind = ErrorKind.CONFLICT


class StorageCorruptError(RepositoryError):
    kind = ErrorKind.STORAGE_CORRUPT
