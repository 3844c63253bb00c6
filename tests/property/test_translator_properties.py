"""
Property-based tests for the resource model / B2BI translator.

Properties covered:
- EDI round trip: model -> service -> model leaves the EDI type unchanged
- Request fidelity: every present model field appears unchanged on the
  request and nothing absent is populated
- Read normalization: empty strings and missing timestamps become absent,
  everything else is copied unchanged
- List shape: summaries carry exactly the summary fields, createdAt always
  and modifiedAt only when the service sent it
- Classifier totality: every exception maps to exactly one handler kind
"""

from datetime import datetime, timezone

from botocore.exceptions import ClientError
from hypothesis import given, settings
from hypothesis import strategies as st

from b2bi_transformer.exceptions import BaseHandlerException, GeneralServiceException
from b2bi_transformer.models import (
    EdiType,
    FileFormat,
    ResourceModel,
    Tag,
    TransformerStatus,
    X12Details,
)
from b2bi_transformer.services.translator import (
    translate_from_list_response,
    translate_from_read_response,
    translate_to_create_request,
    translate_to_resource_edi,
    translate_to_service_edi,
    translate_to_update_request,
)
from b2bi_transformer.utils.error_mapping import SERVICE_ERROR_MAP, to_handler_exception

# =============================================================================
# Strategies for generating test data
# =============================================================================

optional_text = st.none() | st.text(max_size=30)

file_format_strategy = st.none() | st.sampled_from([f.value for f in FileFormat]) | st.text(max_size=10)

status_strategy = st.none() | st.sampled_from([s.value for s in TransformerStatus])

utc_datetimes = st.datetimes(
    min_value=datetime(1970, 1, 1), timezones=st.just(timezone.utc)
)

x12_strategy = st.builds(X12Details, TransactionSet=st.text(max_size=20), Version=st.text(max_size=20))

edi_strategy = st.builds(EdiType, X12Details=x12_strategy)

tag_strategy = st.builds(Tag, Key=st.text(min_size=1, max_size=20), Value=st.text(max_size=20))

resource_model_strategy = st.builds(
    ResourceModel,
    TransformerId=optional_text,
    Name=optional_text,
    FileFormat=file_format_strategy,
    MappingTemplate=optional_text,
    SampleDocument=optional_text,
    EdiType=st.none() | edi_strategy,
    Status=status_strategy,
    Tags=st.none() | st.lists(tag_strategy, max_size=5),
)

read_response_strategy = st.fixed_dictionaries(
    {},
    optional={
        "transformerId": st.text(max_size=30),
        "transformerArn": st.text(max_size=30),
        "name": st.text(max_size=30),
        "fileFormat": st.text(max_size=10),
        "mappingTemplate": st.text(max_size=30),
        "sampleDocument": st.text(max_size=30),
        "status": st.text(max_size=10),
        "createdAt": utc_datetimes,
        "modifiedAt": utc_datetimes,
    },
)

summary_strategy = st.fixed_dictionaries(
    {
        "transformerId": st.text(max_size=30),
        "name": st.text(max_size=30),
        "fileFormat": st.text(max_size=10),
        "mappingTemplate": st.text(max_size=30),
        "status": st.text(max_size=10),
        "createdAt": utc_datetimes,
        "ediType": st.just({"x12Details": {"transactionSet": "X12_850", "version": "VERSION_4010"}}),
    },
    optional={
        "sampleDocument": st.text(max_size=30),
        "modifiedAt": utc_datetimes,
    },
)

READ_FIELDS = {
    "transformerId": "transformer_id",
    "transformerArn": "transformer_arn",
    "name": "name",
    "fileFormat": "file_format",
    "mappingTemplate": "mapping_template",
    "sampleDocument": "sample_document",
    "status": "status",
}

SUMMARY_FIELDS = {
    "transformer_id",
    "name",
    "file_format",
    "mapping_template",
    "sample_document",
    "status",
    "created_at",
    "modified_at",
}


def _iso(value: datetime) -> str:
    if value.microsecond and value.microsecond % 1000 == 0:
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return value.isoformat().replace("+00:00", "Z")


# =============================================================================
# EDI Round Trip
# =============================================================================


class TestEdiRoundTrip:
    """Model -> service -> model is the identity for EDI types."""

    @given(edi_type=edi_strategy)
    @settings(max_examples=100)
    def test_round_trip(self, edi_type):
        assert translate_to_resource_edi(translate_to_service_edi(edi_type)) == edi_type


# =============================================================================
# Request Fidelity
# =============================================================================


class TestRequestFidelity:
    """Present fields are copied unchanged; absent ones are not sent."""

    @given(model=resource_model_strategy)
    @settings(max_examples=100)
    def test_create_request(self, model):
        kwargs = translate_to_create_request(model).to_boto_kwargs()

        expected = {
            "name": model.name,
            "fileFormat": model.file_format,
            "mappingTemplate": model.mapping_template,
            "sampleDocument": model.sample_document,
        }
        for key, value in expected.items():
            if value is None:
                assert key not in kwargs
            else:
                assert kwargs[key] == value

        if model.tags is None:
            assert "tags" not in kwargs
        else:
            assert kwargs["tags"] == [{"Key": t.key, "Value": t.value} for t in model.tags]

        if model.edi_type is None:
            assert "ediType" not in kwargs
        else:
            x12 = model.edi_type.x12_details
            assert kwargs["ediType"] == {
                "x12Details": {"transactionSet": x12.transaction_set, "version": x12.version}
            }

        assert set(kwargs) <= {
            "name", "fileFormat", "mappingTemplate", "sampleDocument", "tags", "ediType"
        }

    @given(model=resource_model_strategy)
    @settings(max_examples=100)
    def test_update_request(self, model):
        kwargs = translate_to_update_request(model).to_boto_kwargs()

        expected = {
            "transformerId": model.transformer_id,
            "name": model.name,
            "fileFormat": model.file_format,
            "mappingTemplate": model.mapping_template,
            "sampleDocument": model.sample_document,
            "status": model.status,
        }
        for key, value in expected.items():
            if value is None:
                assert key not in kwargs
            else:
                assert kwargs[key] == value
        assert ("ediType" in kwargs) == (model.edi_type is not None)
        assert "tags" not in kwargs


# =============================================================================
# Read Normalization
# =============================================================================


class TestReadNormalization:
    """Empty or missing values are absent; everything else is unchanged."""

    @given(response=read_response_strategy)
    @settings(max_examples=200)
    def test_read_response(self, response):
        model = translate_from_read_response(response)

        for wire_name, field in READ_FIELDS.items():
            value = response.get(wire_name)
            assert getattr(model, field) == (value if value else None)

        for wire_name, field in (("createdAt", "created_at"), ("modifiedAt", "modified_at")):
            value = response.get(wire_name)
            assert getattr(model, field) == (_iso(value) if value is not None else None)

    @given(value=utc_datetimes)
    def test_timestamp_is_parseable_iso(self, value):
        rendered = translate_from_read_response({"createdAt": value}).created_at
        assert rendered.endswith("Z")
        assert datetime.fromisoformat(rendered[:-1] + "+00:00") == value


# =============================================================================
# List Shape
# =============================================================================


class TestListShape:
    """Summaries carry only summary fields."""

    @given(summaries=st.lists(summary_strategy, max_size=5))
    @settings(max_examples=100)
    def test_list_response(self, summaries):
        models = translate_from_list_response({"transformers": summaries})

        assert len(models) == len(summaries)
        for summary, model in zip(summaries, models):
            populated = {k for k, v in model.model_dump().items() if v is not None}
            assert populated <= SUMMARY_FIELDS
            assert model.created_at == _iso(summary["createdAt"])
            assert (model.modified_at is None) == ("modifiedAt" not in summary)
            assert model.transformer_id == summary["transformerId"]
            assert model.name == summary["name"]


# =============================================================================
# Classifier Totality
# =============================================================================


class TestClassifierTotality:
    """Every exception maps to exactly one handler kind without raising."""

    @given(code=st.sampled_from(sorted(SERVICE_ERROR_MAP)))
    def test_known_codes(self, code):
        exc = ClientError({"Error": {"Code": code, "Message": "m"}}, "Op")
        assert type(to_handler_exception(exc)) is SERVICE_ERROR_MAP[code]

    @given(code=st.text(max_size=40).filter(lambda c: c not in SERVICE_ERROR_MAP))
    def test_unknown_codes(self, code):
        exc = ClientError({"Error": {"Code": code, "Message": "m"}}, "Op")
        assert type(to_handler_exception(exc)) is GeneralServiceException

    @given(message=st.text(max_size=40))
    def test_non_service_exceptions(self, message):
        result = to_handler_exception(ValueError(message))
        assert isinstance(result, BaseHandlerException)
        assert type(result) is GeneralServiceException
