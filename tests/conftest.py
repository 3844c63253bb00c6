"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from b2bi_transformer.models import EdiType, ResourceModel, Tag, X12Details


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_env(monkeypatch):
    """Set up test environment variables."""
    test_vars = {
        "AWS_REGION": "us-west-2",
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "test",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


# =============================================================================
# AWS Mocks
# =============================================================================

@pytest.fixture
def mock_b2bi_client():
    """Create a mock boto3 b2bi client for testing."""
    client = MagicMock()
    client.create_transformer.return_value = {}
    client.get_transformer.return_value = {}
    client.update_transformer.return_value = {}
    client.delete_transformer.return_value = {}
    client.list_transformers.return_value = {"transformers": []}
    client.tag_resource.return_value = {}
    client.untag_resource.return_value = {}
    return client


# =============================================================================
# Test Data Fixtures
# =============================================================================

TRANSFORMER_ID = "tr-1234567890abcdef0"
TRANSFORMER_ARN = f"arn:aws:b2bi:us-east-1:123456789012:transformer/{TRANSFORMER_ID}"
CREATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
MODIFIED_AT = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.fixture
def edi_type():
    """Provide a flattened X12 EDI type."""
    return EdiType(x12_details=X12Details(transaction_set="X12_850", version="VERSION_4010"))


@pytest.fixture
def resource_model(edi_type):
    """Provide a resource model as it looks after creation."""
    return ResourceModel(
        transformer_id=TRANSFORMER_ID,
        transformer_arn=TRANSFORMER_ARN,
        name="demo",
        file_format="JSON",
        mapping_template="$",
        sample_document="s3://bucket/sample.edi",
        edi_type=edi_type,
        status="active",
        tags=[Tag(key="Environment", value="production")],
    )


@pytest.fixture
def get_transformer_response():
    """Provide a raw boto3 GetTransformer response."""
    return {
        "ResponseMetadata": {"RequestId": "req-1", "HTTPStatusCode": 200},
        "transformerId": TRANSFORMER_ID,
        "transformerArn": TRANSFORMER_ARN,
        "name": "demo",
        "fileFormat": "JSON",
        "mappingTemplate": "$",
        "status": "active",
        "ediType": {"x12Details": {"transactionSet": "X12_850", "version": "VERSION_4010"}},
        "sampleDocument": "s3://bucket/sample.edi",
        "createdAt": CREATED_AT,
        "modifiedAt": MODIFIED_AT,
    }


@pytest.fixture
def list_transformers_response():
    """Provide a raw boto3 ListTransformers response with two entries."""
    return {
        "transformers": [
            {
                "transformerId": "tr-one",
                "name": "one",
                "fileFormat": "JSON",
                "mappingTemplate": "$",
                "status": "active",
                "ediType": {"x12Details": {"transactionSet": "X12_850", "version": "VERSION_4010"}},
                "sampleDocument": "s3://bucket/one.edi",
                "createdAt": CREATED_AT,
                "modifiedAt": MODIFIED_AT,
            },
            {
                "transformerId": "tr-two",
                "name": "two",
                "fileFormat": "XML",
                "mappingTemplate": "<xsl/>",
                "status": "inactive",
                "ediType": {"x12Details": {"transactionSet": "X12_810", "version": "VERSION_5010"}},
                "createdAt": CREATED_AT,
            },
        ],
        "nextToken": "page-2",
    }
