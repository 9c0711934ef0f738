"""
Application error taxonomy

Handlers raise these; the API layer renders them with ``error_response``.
"""

from typing import Any, Optional


class AppError(Exception):
    status_code = 500
    error_code = "internal_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    status_code = 404
    error_code = "not_found"


class BadRequestError(AppError):
    status_code = 400
    error_code = "bad_request"


class RequestTimeoutError(AppError):
    status_code = 408
    error_code = "timeout"


class InternalError(AppError):
    status_code = 500
    error_code = "internal_error"
