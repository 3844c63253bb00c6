"""Exceptions reported to the resource provider framework.

Every failure surfaced by a handler is one of the classes below, each
tied to a fixed :class:`HandlerErrorCode`:

    BaseHandlerException
    ├── AccessDenied
    ├── AlreadyExists
    ├── ServiceInternalError
    ├── NotFound
    ├── ServiceLimitExceeded
    ├── Throttling
    ├── InvalidRequest
    └── GeneralServiceException
"""

from typing import Any

from .models.enums import HandlerErrorCode


class BaseHandlerException(Exception):
    """
    Base exception for all handler failures.

    Attributes:
        error_code: Framework error code for this failure kind
        message: Human-readable error description
        cause: The service exception this one was classified from
    """

    error_code: HandlerErrorCode = HandlerErrorCode.GENERAL_SERVICE_EXCEPTION

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def to_progress_event(self) -> dict[str, Any]:
        """Render the failed progress event the framework reports back."""
        return {
            "status": "FAILED",
            "errorCode": self.error_code.value,
            "message": self.message,
        }


class AccessDenied(BaseHandlerException):
    error_code = HandlerErrorCode.ACCESS_DENIED


class AlreadyExists(BaseHandlerException):
    error_code = HandlerErrorCode.ALREADY_EXISTS


class ServiceInternalError(BaseHandlerException):
    error_code = HandlerErrorCode.SERVICE_INTERNAL_ERROR


class NotFound(BaseHandlerException):
    error_code = HandlerErrorCode.NOT_FOUND


class ServiceLimitExceeded(BaseHandlerException):
    error_code = HandlerErrorCode.SERVICE_LIMIT_EXCEEDED


class Throttling(BaseHandlerException):
    error_code = HandlerErrorCode.THROTTLING


class InvalidRequest(BaseHandlerException):
    error_code = HandlerErrorCode.INVALID_REQUEST


class GeneralServiceException(BaseHandlerException):
    error_code = HandlerErrorCode.GENERAL_SERVICE_EXCEPTION
