"""Transformer resource model.

Field aliases are the property names of the resource schema, so a model
can be built straight from the property bag the provider framework hands
over and dumped back with ``model_dump(by_alias=True)``.
"""

from pydantic import BaseModel, ConfigDict, Field


class _ResourceBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class X12Details(_ResourceBase):
    """X12 transaction set and version, flattened to plain strings."""

    transaction_set: str | None = Field(
        None, alias="TransactionSet", description="X12 transaction set code (e.g., X12_850)"
    )
    version: str | None = Field(
        None, alias="Version", description="X12 version (e.g., VERSION_4010)"
    )


class EdiType(_ResourceBase):
    """EDI typing of a transformer. X12 is the only supported variant."""

    x12_details: X12Details | None = Field(None, alias="X12Details")


class Tag(_ResourceBase):
    """A key/value label attached to the transformer."""

    key: str = Field(..., alias="Key")
    value: str = Field(..., alias="Value")


class ResourceModel(_ResourceBase):
    """Declarative representation of a B2BI transformer."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Name": "demo",
                "FileFormat": "JSON",
                "MappingTemplate": "$",
                "EdiType": {
                    "X12Details": {"TransactionSet": "X12_850", "Version": "VERSION_4010"}
                },
                "Tags": [{"Key": "Environment", "Value": "production"}],
            }
        },
    )

    transformer_id: str | None = Field(
        None, alias="TransformerId", description="Identifier assigned by the service"
    )
    transformer_arn: str | None = Field(
        None, alias="TransformerArn", description="ARN assigned by the service"
    )
    name: str | None = Field(None, alias="Name")
    file_format: str | None = Field(None, alias="FileFormat")
    mapping_template: str | None = Field(
        None, alias="MappingTemplate", description="JSONata or XSLT template body"
    )
    sample_document: str | None = Field(
        None, alias="SampleDocument", description="Location of a sample document"
    )
    edi_type: EdiType | None = Field(None, alias="EdiType")
    status: str | None = Field(None, alias="Status")
    created_at: str | None = Field(
        None, alias="CreatedAt", description="Creation time as an ISO-8601 string"
    )
    modified_at: str | None = Field(
        None, alias="ModifiedAt", description="Last modification time as an ISO-8601 string"
    )
    tags: list[Tag] | None = Field(None, alias="Tags")
