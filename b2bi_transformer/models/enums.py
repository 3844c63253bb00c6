"""Enumerations for transformer attributes and handler error codes."""

from enum import Enum


class FileFormat(str, Enum):
    """Document formats a transformer can read."""

    XML = "XML"
    JSON = "JSON"
    NOT_USED = "NOT_USED"


class TransformerStatus(str, Enum):
    """Lifecycle status assigned by the service."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class HandlerErrorCode(str, Enum):
    """Error codes reported back to the resource provider framework."""

    ACCESS_DENIED = "AccessDenied"
    ALREADY_EXISTS = "AlreadyExists"
    SERVICE_INTERNAL_ERROR = "ServiceInternalError"
    NOT_FOUND = "NotFound"
    SERVICE_LIMIT_EXCEEDED = "ServiceLimitExceeded"
    THROTTLING = "Throttling"
    INVALID_REQUEST = "InvalidRequest"
    GENERAL_SERVICE_EXCEPTION = "GeneralServiceException"
