"""Translation between the transformer resource model and the B2BI API.

This module is the single place for:
- service request construction from a resource model
- resource model construction from read and list responses
- conversion of the nested EDI type between both representations

Every function is pure: inputs are never mutated and each call returns
new objects.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from ..models.resource import EdiType, ResourceModel, X12Details
from ..models.service import (
    CreateTransformerRequest,
    DeleteTransformerRequest,
    GetTransformerRequest,
    GetTransformerResponse,
    ListTransformersRequest,
    ListTransformersResponse,
    ServiceEdiType,
    ServiceX12Details,
    TagResourceRequest,
    UntagResourceRequest,
    UpdateTransformerRequest,
)
from .tag_helper import convert_to_list, to_service_tag


# =============================================================================
# Request builders
# =============================================================================


def translate_to_create_request(model: ResourceModel) -> CreateTransformerRequest:
    """
    Build the request that creates a transformer.

    Args:
        model: Resource model with name, file format and mapping template

    Returns:
        CreateTransformerRequest with every field copied verbatim
    """
    return CreateTransformerRequest(
        name=model.name,
        file_format=model.file_format,
        mapping_template=model.mapping_template,
        sample_document=model.sample_document,
        tags=[to_service_tag(tag) for tag in model.tags] if model.tags is not None else None,
        edi_type=translate_to_service_edi(model.edi_type),
    )


def translate_to_read_request(model: ResourceModel) -> GetTransformerRequest:
    """Build the request that describes a transformer."""
    return GetTransformerRequest(transformer_id=model.transformer_id)


def translate_to_delete_request(model: ResourceModel) -> DeleteTransformerRequest:
    """Build the request that deletes a transformer."""
    return DeleteTransformerRequest(transformer_id=model.transformer_id)


def translate_to_update_request(model: ResourceModel) -> UpdateTransformerRequest:
    """
    Build the request that modifies a transformer.

    Status is passed through as given; the caller decides whether a
    status change is legal.

    Args:
        model: Resource model carrying the transformer id

    Returns:
        UpdateTransformerRequest with all mutable fields copied
    """
    return UpdateTransformerRequest(
        transformer_id=model.transformer_id,
        name=model.name,
        edi_type=translate_to_service_edi(model.edi_type),
        file_format=model.file_format,
        mapping_template=model.mapping_template,
        sample_document=model.sample_document,
        status=model.status,
    )


def translate_to_list_request(next_token: str | None = None) -> ListTransformersRequest:
    """
    Build the request that lists transformers.

    Args:
        next_token: Pagination token from a previous page, if any

    Returns:
        ListTransformersRequest; the token is left unset when absent
    """
    if next_token is None:
        return ListTransformersRequest()
    return ListTransformersRequest(next_token=next_token)


def translate_to_tag_resource_request(
    model: ResourceModel, added_tags: Mapping[str, str]
) -> TagResourceRequest:
    """
    Build the request that attaches tags to a transformer.

    Args:
        model: Resource model carrying the transformer ARN
        added_tags: Tag keys and values to attach

    Returns:
        TagResourceRequest keyed by the transformer ARN
    """
    return TagResourceRequest(
        resource_arn=model.transformer_arn,
        tags=[to_service_tag(tag) for tag in convert_to_list(added_tags)],
    )


def translate_to_untag_resource_request(
    model: ResourceModel, removed_tags: Iterable[str]
) -> UntagResourceRequest:
    """
    Build the request that detaches tags from a transformer.

    Args:
        model: Resource model carrying the transformer ARN
        removed_tags: Tag keys to detach

    Returns:
        UntagResourceRequest keyed by the transformer ARN
    """
    return UntagResourceRequest(
        resource_arn=model.transformer_arn,
        tag_keys=sorted(set(removed_tags)),
    )


# =============================================================================
# Response parsers
# =============================================================================


def translate_from_read_response(
    response: GetTransformerResponse | Mapping[str, Any],
) -> ResourceModel:
    """
    Build a resource model from a GetTransformer response.

    Empty strings and missing timestamps become absent fields.

    Args:
        response: GetTransformerResponse or the raw boto3 response dict

    Returns:
        Fully populated ResourceModel
    """
    if not isinstance(response, GetTransformerResponse):
        response = GetTransformerResponse.model_validate(response)

    return ResourceModel(
        transformer_id=_empty_to_none(response.transformer_id),
        transformer_arn=_empty_to_none(response.transformer_arn),
        name=_empty_to_none(response.name),
        file_format=_empty_to_none(response.file_format),
        mapping_template=_empty_to_none(response.mapping_template),
        sample_document=_empty_to_none(response.sample_document),
        edi_type=translate_to_resource_edi(response.edi_type),
        status=_empty_to_none(response.status),
        created_at=_format_timestamp(response.created_at),
        modified_at=_format_timestamp(response.modified_at),
    )


def translate_from_list_response(
    response: ListTransformersResponse | Mapping[str, Any],
) -> list[ResourceModel]:
    """
    Build summary resource models from a ListTransformers response.

    Only the summary fields are populated; ARN and EDI type are not part
    of a listing. Strings are copied verbatim, ``createdAt`` is always
    rendered and ``modifiedAt`` only when present.

    Args:
        response: ListTransformersResponse or the raw boto3 response dict

    Returns:
        One ResourceModel per listed transformer, in response order
    """
    if not isinstance(response, ListTransformersResponse):
        response = ListTransformersResponse.model_validate(response)

    return [
        ResourceModel(
            transformer_id=summary.transformer_id,
            name=summary.name,
            file_format=summary.file_format,
            mapping_template=summary.mapping_template,
            sample_document=summary.sample_document,
            status=summary.status,
            created_at=_timestamp_to_string(summary.created_at),
            modified_at=(
                _timestamp_to_string(summary.modified_at)
                if summary.modified_at is not None
                else None
            ),
        )
        for summary in response.transformers
    ]


# =============================================================================
# EDI type conversion
# =============================================================================


def translate_to_service_edi(edi_type: EdiType | None) -> ServiceEdiType | None:
    """Wrap the flattened X12 details into the service EDI union."""
    if edi_type is None:
        return None
    x12 = edi_type.x12_details
    if x12 is None:
        return ServiceEdiType()
    return ServiceEdiType(
        x12_details=ServiceX12Details(
            transaction_set=x12.transaction_set,
            version=x12.version,
        )
    )


def translate_to_resource_edi(edi_type: ServiceEdiType | None) -> EdiType | None:
    """Unwrap the service EDI union into flattened X12 details."""
    if edi_type is None:
        return None
    x12 = edi_type.x12_details
    if x12 is None:
        return EdiType()
    return EdiType(
        x12_details=X12Details(
            transaction_set=x12.transaction_set,
            version=x12.version,
        )
    )


# =============================================================================
# Helpers
# =============================================================================


def _empty_to_none(value: str | None) -> str | None:
    return value if value else None


def _format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return _timestamp_to_string(value)


def _timestamp_to_string(value: datetime) -> str:
    # Naive datetimes are UTC; fractions print in groups of three digits
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    if value.microsecond and value.microsecond % 1000 == 0:
        rendered = value.isoformat(timespec="milliseconds")
    else:
        rendered = value.isoformat()
    return rendered.replace("+00:00", "Z")
