"""Post type filtering for the archive notice.

A post type is "affected" when its archive lives under a custom slug and
both archive templates still hold their shipped defaults: the settings
screen used to save those templates under the wrong key for such types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from .ports import OptionsStore, PostTypeRegistry

logger = logging.getLogger(__name__)

ATTACHMENT_POST_TYPE = "attachment"

TITLE_OPTION_PREFIX = "title-ptarchive-"
METADESC_OPTION_PREFIX = "metadesc-ptarchive-"


@dataclass(frozen=True)
class PostTypeDescriptor:
    """A registered post type as seen by the archive notice.

    Attributes:
        name: Post type name (e.g. "book")
        has_archive: Whether the type has an archive listing page
        archive_slug_overridden: True when the archive slug is a custom string
            rather than the CMS-computed default
    """

    name: str
    has_archive: bool = False
    archive_slug_overridden: bool = False

    @classmethod
    def from_registration(cls, name: str, has_archive) -> "PostTypeDescriptor":
        """Build a descriptor from a CMS-style ``has_archive`` registration value.

        ``True`` means an archive under the default slug, a non-empty string is
        a custom slug, anything falsy means no archive.
        """
        if has_archive is True:
            return cls(name=name, has_archive=True, archive_slug_overridden=False)
        if isinstance(has_archive, str) and has_archive:
            return cls(name=name, has_archive=True, archive_slug_overridden=True)
        return cls(name=name)


def title_option_name(post_type: str) -> str:
    return TITLE_OPTION_PREFIX + post_type


def metadesc_option_name(post_type: str) -> str:
    return METADESC_OPTION_PREFIX + post_type


def has_custom_archive_slug(post_type: PostTypeDescriptor) -> bool:
    """True when the type has an archive under an overridden slug."""
    return post_type.has_archive and post_type.archive_slug_overridden


def is_equal_to_default(
    option_name: str, title_defaults: Mapping[str, str], options: OptionsStore
) -> bool:
    # No recorded default counts as customized.
    if option_name not in title_defaults:
        return False
    return options.get(option_name) == title_defaults[option_name]


def uses_default_templates(
    post_type_name: str, title_defaults: Mapping[str, str], options: OptionsStore
) -> bool:
    """True when both archive templates of the type equal their shipped defaults."""
    return is_equal_to_default(
        title_option_name(post_type_name), title_defaults, options
    ) and is_equal_to_default(metadesc_option_name(post_type_name), title_defaults, options)


def filter_affected_types(
    post_types: Iterable[PostTypeDescriptor],
    title_defaults: Mapping[str, str],
    options: OptionsStore,
) -> list[str]:
    """Return names of the post types whose archive settings may be wrong.

    Registry order is preserved.
    """
    affected = []
    for post_type in post_types:
        if post_type.name == ATTACHMENT_POST_TYPE:
            continue
        if not has_custom_archive_slug(post_type):
            continue
        if not uses_default_templates(post_type.name, title_defaults, options):
            logger.debug("Post type %s has customized archive templates", post_type.name)
            continue
        affected.append(post_type.name)
    return affected


class EvaluationCache:
    """Lazily loaded lookups shared by the steps of a single evaluation.

    Build a fresh instance per evaluation; nothing here outlives it.
    """

    def __init__(self, options: OptionsStore, registry: PostTypeRegistry):
        self._options = options
        self._registry = registry
        self._title_defaults: Mapping[str, str] | None = None
        self._affected_types: list[str] | None = None

    @property
    def title_defaults(self) -> Mapping[str, str]:
        if self._title_defaults is None:
            self._title_defaults = dict(self._options.get_title_defaults())
        return self._title_defaults

    @property
    def affected_types(self) -> list[str]:
        if self._affected_types is None:
            self._affected_types = filter_affected_types(
                self._registry.list_public_types(), self.title_defaults, self._options
            )
        return self._affected_types
