"""
shopco/core/errors.py - Domain errors shared by the cart and auth services.

Every error is rendered by the app-level handler as
`{"success": false, "message": ..., "error": ...}` with `status_code`.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

logger = logging.getLogger("shopco.errors")


class ShopError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error or self.code


class NotFoundError(ShopError):
    status_code = 404
    code = "NOT_FOUND"


class AlreadyExistsError(ShopError):
    status_code = 400
    code = "ALREADY_EXISTS"


class InvalidCredentialsError(ShopError):
    status_code = 401
    code = "INVALID_CREDENTIALS"


class StorageFailureError(ShopError):
    status_code = 500
    code = "STORAGE_FAILURE"


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """
    Turn store failures inside the block into StorageFailureError(message): API and
    credential errors, and the ValueError the Firestore encoder raises for values it
    cannot store (integers outside int64).
    """
    try:
        yield
    except (GoogleAPIError, GoogleAuthError, ValueError) as exc:
        logger.error("%s: %s", message, exc)
        raise StorageFailureError(message, str(exc)) from exc
