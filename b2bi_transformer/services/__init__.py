"""Translation services for the B2BI transformer resource provider."""

from . import tag_helper
from .translator import (
    translate_from_list_response,
    translate_from_read_response,
    translate_to_create_request,
    translate_to_delete_request,
    translate_to_list_request,
    translate_to_read_request,
    translate_to_resource_edi,
    translate_to_service_edi,
    translate_to_tag_resource_request,
    translate_to_untag_resource_request,
    translate_to_update_request,
)

__all__ = [
    "tag_helper",
    "translate_from_list_response",
    "translate_from_read_response",
    "translate_to_create_request",
    "translate_to_delete_request",
    "translate_to_list_request",
    "translate_to_read_request",
    "translate_to_resource_edi",
    "translate_to_service_edi",
    "translate_to_tag_resource_request",
    "translate_to_untag_resource_request",
    "translate_to_update_request",
]
