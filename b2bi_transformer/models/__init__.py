"""Data models for the B2BI transformer resource provider."""

from .enums import FileFormat, HandlerErrorCode, TransformerStatus
from .resource import EdiType, ResourceModel, Tag, X12Details
from .service import (
    CreateTransformerRequest,
    DeleteTransformerRequest,
    GetTransformerRequest,
    GetTransformerResponse,
    ListTransformersRequest,
    ListTransformersResponse,
    ServiceEdiType,
    ServiceTag,
    ServiceX12Details,
    TagResourceRequest,
    TransformerSummary,
    UntagResourceRequest,
    UpdateTransformerRequest,
)

__all__ = [
    "FileFormat",
    "HandlerErrorCode",
    "TransformerStatus",
    "EdiType",
    "ResourceModel",
    "Tag",
    "X12Details",
    "CreateTransformerRequest",
    "DeleteTransformerRequest",
    "GetTransformerRequest",
    "GetTransformerResponse",
    "ListTransformersRequest",
    "ListTransformersResponse",
    "ServiceEdiType",
    "ServiceTag",
    "ServiceX12Details",
    "TagResourceRequest",
    "TransformerSummary",
    "UntagResourceRequest",
    "UpdateTransformerRequest",
]
