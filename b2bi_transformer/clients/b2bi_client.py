"""B2BI client wrapper for transformer resources.

Wires the translator to a boto3 ``b2bi`` client: every call builds its
request from a resource model, issues it, and turns the response back
into resource models. Service failures are re-raised as handler
exceptions.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import Settings, settings as default_settings
from ..models.resource import ResourceModel
from ..services import tag_helper, translator
from ..utils.error_mapping import to_handler_exception

logger = logging.getLogger(__name__)


class TransformerClient:
    """
    Wrapper around a boto3 b2bi client for transformer CRUDL and tagging.

    Uses the default credential chain; no credentials are handled here.
    """

    def __init__(self, client: Any | None = None, config: Settings | None = None):
        """
        Initialize the wrapper.

        Args:
            client: Pre-built boto3 b2bi client (created from settings if None)
            config: Settings to build the client from (global settings if None)
        """
        if client is None:
            config = config or default_settings()
            client = boto3.client(
                "b2bi",
                endpoint_url=config.b2bi_endpoint_url,
                config=Config(region_name=config.aws_region),
            )
        self.client = client

    def _call(self, operation: str, func: Callable[..., Any], kwargs: dict[str, Any]) -> Any:
        """
        Call a b2bi API and classify any service failure.

        Args:
            operation: API operation name, for logging
            func: Bound boto3 client method
            kwargs: Keyword arguments built by the translator

        Returns:
            Raw boto3 response

        Raises:
            BaseHandlerException: The classified service failure
        """
        logger.debug(f"Calling b2bi {operation} with {sorted(kwargs)}")
        try:
            return func(**kwargs)
        except (ClientError, BotoCoreError) as e:
            handler_error = to_handler_exception(e)
            logger.warning(
                f"b2bi {operation} failed: {handler_error.error_code.value}: {handler_error.message}"
            )
            raise handler_error from e

    def create_transformer(self, model: ResourceModel) -> ResourceModel:
        """
        Create a transformer.

        Returns:
            Copy of the model with the service-assigned identifiers and
            read-only attributes filled in
        """
        request = translator.translate_to_create_request(model)
        response = self._call(
            "CreateTransformer", self.client.create_transformer, request.to_boto_kwargs()
        )
        created = translator.translate_from_read_response(response)
        tags = list(model.tags) if model.tags is not None else None
        return created.model_copy(update={"tags": tags})

    def get_transformer(self, model: ResourceModel) -> ResourceModel:
        request = translator.translate_to_read_request(model)
        response = self._call(
            "GetTransformer", self.client.get_transformer, request.to_boto_kwargs()
        )
        return translator.translate_from_read_response(response)

    def update_transformer(self, model: ResourceModel) -> ResourceModel:
        request = translator.translate_to_update_request(model)
        response = self._call(
            "UpdateTransformer", self.client.update_transformer, request.to_boto_kwargs()
        )
        return translator.translate_from_read_response(response)

    def delete_transformer(self, model: ResourceModel) -> None:
        request = translator.translate_to_delete_request(model)
        self._call("DeleteTransformer", self.client.delete_transformer, request.to_boto_kwargs())

    def list_transformers(
        self, next_token: str | None = None
    ) -> tuple[list[ResourceModel], str | None]:
        """
        Fetch a single page of transformers.

        Args:
            next_token: Token from the previous page, if any

        Returns:
            Tuple of (summary models, token for the next page or None)
        """
        request = translator.translate_to_list_request(next_token)
        response = self._call(
            "ListTransformers", self.client.list_transformers, request.to_boto_kwargs()
        )
        models = translator.translate_from_list_response(response)
        return models, response.get("nextToken")

    def tag_resource(self, model: ResourceModel, added_tags: Mapping[str, str]) -> None:
        request = translator.translate_to_tag_resource_request(model, added_tags)
        self._call("TagResource", self.client.tag_resource, request.to_boto_kwargs())

    def untag_resource(self, model: ResourceModel, removed_tags: Iterable[str]) -> None:
        request = translator.translate_to_untag_resource_request(model, removed_tags)
        self._call("UntagResource", self.client.untag_resource, request.to_boto_kwargs())

    def update_tags(
        self,
        model: ResourceModel,
        previous_tags: Mapping[str, str],
        desired_tags: Mapping[str, str],
    ) -> None:
        """
        Reconcile the tags attached to a transformer.

        Detaches keys no longer desired, then attaches new or changed
        tags. Either call is skipped when it has nothing to do.

        Args:
            model: Resource model carrying the transformer ARN
            previous_tags: Tags currently attached
            desired_tags: Tags that should be attached
        """
        if not tag_helper.should_update_tags(previous_tags, desired_tags):
            return

        removed = tag_helper.generate_tags_to_remove(previous_tags, desired_tags)
        if removed:
            self.untag_resource(model, removed)

        added = tag_helper.generate_tags_to_add(previous_tags, desired_tags)
        if added:
            self.tag_resource(model, added)
