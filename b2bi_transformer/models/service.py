"""Request and response shapes of the B2B Data Interchange API.

Aliases are the exact boto3 parameter and response key names. Request
models render themselves as boto3 keyword arguments; response models are
validated from the dicts boto3 returns and ignore keys they do not model
(``ResponseMetadata`` and the newer mapping/conversion fields).
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ServiceShape(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class _ServiceRequest(_ServiceShape):
    def to_boto_kwargs(self) -> dict[str, Any]:
        """Render the request as boto3 keyword arguments, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# Nested types
# =============================================================================


class ServiceX12Details(_ServiceShape):
    """X12 variant of the service EDI union. Both fields are service enums."""

    transaction_set: str | None = Field(None, alias="transactionSet")
    version: str | None = Field(None, alias="version")


class ServiceEdiType(_ServiceShape):
    """Service EDI union; ``x12Details`` is its only member."""

    x12_details: ServiceX12Details | None = Field(None, alias="x12Details")


class ServiceTag(_ServiceShape):
    key: str = Field(..., alias="Key")
    value: str = Field(..., alias="Value")


# =============================================================================
# Requests
# =============================================================================


class CreateTransformerRequest(_ServiceRequest):
    name: str | None = Field(None, alias="name")
    file_format: str | None = Field(None, alias="fileFormat")
    mapping_template: str | None = Field(None, alias="mappingTemplate")
    edi_type: ServiceEdiType | None = Field(None, alias="ediType")
    sample_document: str | None = Field(None, alias="sampleDocument")
    tags: list[ServiceTag] | None = Field(None, alias="tags")


class GetTransformerRequest(_ServiceRequest):
    transformer_id: str | None = Field(None, alias="transformerId")


class UpdateTransformerRequest(_ServiceRequest):
    transformer_id: str | None = Field(None, alias="transformerId")
    name: str | None = Field(None, alias="name")
    file_format: str | None = Field(None, alias="fileFormat")
    mapping_template: str | None = Field(None, alias="mappingTemplate")
    status: str | None = Field(None, alias="status")
    edi_type: ServiceEdiType | None = Field(None, alias="ediType")
    sample_document: str | None = Field(None, alias="sampleDocument")


class DeleteTransformerRequest(_ServiceRequest):
    transformer_id: str | None = Field(None, alias="transformerId")


class ListTransformersRequest(_ServiceRequest):
    next_token: str | None = Field(None, alias="nextToken")


class TagResourceRequest(_ServiceRequest):
    resource_arn: str | None = Field(None, alias="ResourceARN")
    tags: list[ServiceTag] = Field(default_factory=list, alias="Tags")


class UntagResourceRequest(_ServiceRequest):
    resource_arn: str | None = Field(None, alias="ResourceARN")
    tag_keys: list[str] = Field(default_factory=list, alias="TagKeys")


# =============================================================================
# Responses
# =============================================================================


class GetTransformerResponse(_ServiceShape):
    transformer_id: str | None = Field(None, alias="transformerId")
    transformer_arn: str | None = Field(None, alias="transformerArn")
    name: str | None = Field(None, alias="name")
    file_format: str | None = Field(None, alias="fileFormat")
    mapping_template: str | None = Field(None, alias="mappingTemplate")
    status: str | None = Field(None, alias="status")
    edi_type: ServiceEdiType | None = Field(None, alias="ediType")
    sample_document: str | None = Field(None, alias="sampleDocument")
    created_at: datetime | None = Field(None, alias="createdAt")
    modified_at: datetime | None = Field(None, alias="modifiedAt")


class TransformerSummary(_ServiceShape):
    """One entry of a ListTransformers page.

    ``createdAt`` is always returned by the service and is required here.
    """

    transformer_id: str | None = Field(None, alias="transformerId")
    name: str | None = Field(None, alias="name")
    file_format: str | None = Field(None, alias="fileFormat")
    mapping_template: str | None = Field(None, alias="mappingTemplate")
    status: str | None = Field(None, alias="status")
    edi_type: ServiceEdiType | None = Field(None, alias="ediType")
    sample_document: str | None = Field(None, alias="sampleDocument")
    created_at: datetime = Field(..., alias="createdAt")
    modified_at: datetime | None = Field(None, alias="modifiedAt")


class ListTransformersResponse(_ServiceShape):
    transformers: list[TransformerSummary] = Field(default_factory=list, alias="transformers")
    next_token: str | None = Field(None, alias="nextToken")
