"""Tag conversions and tag diffing for the transformer resource.

Tags reach a handler from three places: the resource's own ``Tags``
property, stack-level tags and system tags added by the framework. The
helpers below merge those sources and compute what an update has to
attach or detach.
"""

from collections.abc import Iterable, Mapping

from ..models.resource import ResourceModel, Tag
from ..models.service import ServiceTag


def convert_to_map(tags: Iterable[Tag] | None) -> dict[str, str]:
    """
    Convert a list of resource tags to a dictionary.

    Args:
        tags: Resource tags, or None

    Returns:
        Dictionary of tag key-value pairs; later duplicates win
    """
    if not tags:
        return {}
    return {tag.key: tag.value for tag in tags}


def convert_to_list(tags: Mapping[str, str] | None) -> list[Tag]:
    """Convert a tag dictionary to resource tags, keeping mapping order."""
    if not tags:
        return []
    return [Tag(key=key, value=value) for key, value in tags.items()]


def to_service_tag(tag: Tag) -> ServiceTag:
    return ServiceTag(key=tag.key, value=tag.value)


def from_service_tag(tag: ServiceTag) -> Tag:
    return Tag(key=tag.key, value=tag.value)


def _merge_tags(
    model: ResourceModel | None,
    stack_tags: Mapping[str, str] | None,
    system_tags: Mapping[str, str] | None,
) -> dict[str, str]:
    merged: dict[str, str] = {}
    if stack_tags:
        merged.update(stack_tags)
    if system_tags:
        merged.update(system_tags)
    if model is not None:
        merged.update(convert_to_map(model.tags))
    return merged


def generate_tags_for_create(
    model: ResourceModel,
    stack_tags: Mapping[str, str] | None = None,
    system_tags: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Collect every tag to attach when the transformer is created.

    Stack tags are applied first, then system tags, then the resource's
    own tags, each overriding keys set before it.

    Args:
        model: Desired resource model
        stack_tags: Stack-level tags from the framework
        system_tags: System tags from the framework

    Returns:
        Merged tag dictionary
    """
    return _merge_tags(model, stack_tags, system_tags)


def get_previously_attached_tags(
    previous_model: ResourceModel | None,
    previous_stack_tags: Mapping[str, str] | None = None,
    previous_system_tags: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Tags that were attached before an update."""
    return _merge_tags(previous_model, previous_stack_tags, previous_system_tags)


def get_new_desired_tags(
    model: ResourceModel,
    stack_tags: Mapping[str, str] | None = None,
    system_tags: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Tags that should be attached after an update."""
    return _merge_tags(model, stack_tags, system_tags)


def should_update_tags(previous_tags: Mapping[str, str], desired_tags: Mapping[str, str]) -> bool:
    return dict(previous_tags) != dict(desired_tags)


def generate_tags_to_add(
    previous_tags: Mapping[str, str], desired_tags: Mapping[str, str]
) -> dict[str, str]:
    """
    Determine the tags to attach: new keys and keys whose value changed.

    Args:
        previous_tags: Tags currently attached
        desired_tags: Tags that should be attached

    Returns:
        Dictionary of tags to attach
    """
    return {
        key: value
        for key, value in desired_tags.items()
        if key not in previous_tags or previous_tags[key] != value
    }


def generate_tags_to_remove(
    previous_tags: Mapping[str, str], desired_tags: Mapping[str, str]
) -> set[str]:
    """Determine the tag keys to detach: attached keys no longer desired."""
    return set(previous_tags) - set(desired_tags)
