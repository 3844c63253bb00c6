"""Translation layer for the AWS::B2BI::Transformer resource provider."""

__version__ = "0.1.0"

from .exceptions import (
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
from .models import EdiType, ResourceModel, Tag, X12Details
from .utils.error_mapping import to_handler_exception

__all__ = [
    "__version__",
    "AccessDenied",
    "AlreadyExists",
    "BaseHandlerException",
    "GeneralServiceException",
    "InvalidRequest",
    "NotFound",
    "ServiceInternalError",
    "ServiceLimitExceeded",
    "Throttling",
    "EdiType",
    "ResourceModel",
    "Tag",
    "X12Details",
    "to_handler_exception",
]
