"""Classification of B2BI service exceptions into handler exceptions.

Classification is by the error code botocore attaches to a
``ClientError`` (``response["Error"]["Code"]``), never by message text.
The table is closed: any code outside it, and any exception that is not a
``ClientError`` at all, falls back to :class:`GeneralServiceException`.
"""

from botocore.exceptions import ClientError

from ..exceptions import (
    AccessDenied,
    AlreadyExists,
    BaseHandlerException,
    GeneralServiceException,
    InvalidRequest,
    NotFound,
    ServiceInternalError,
    ServiceLimitExceeded,
    Throttling,
)

SERVICE_ERROR_MAP: dict[str, type[BaseHandlerException]] = {
    "AccessDeniedException": AccessDenied,
    "ConflictException": AlreadyExists,
    "InternalServerException": ServiceInternalError,
    "ResourceNotFoundException": NotFound,
    "ServiceQuotaExceededException": ServiceLimitExceeded,
    "ThrottlingException": Throttling,
    "ValidationException": InvalidRequest,
}


def get_service_error_code(exc: BaseException) -> str | None:
    """
    Extract the service error code from an exception.

    Args:
        exc: Exception raised by a boto3 call

    Returns:
        The error code for a ``ClientError``, None for anything else
    """
    if not isinstance(exc, ClientError):
        return None
    error = exc.response.get("Error") or {}
    return error.get("Code") or None


def to_handler_exception(exc: BaseException) -> BaseHandlerException:
    """
    Classify a service exception into exactly one handler exception.

    Args:
        exc: Exception raised by a boto3 call (or anything else)

    Returns:
        Handler exception chained to ``exc``; GeneralServiceException when
        the error code is unknown or missing
    """
    error_code = get_service_error_code(exc)
    exception_class = SERVICE_ERROR_MAP.get(error_code or "", GeneralServiceException)
    return exception_class(str(exc), cause=exc)
