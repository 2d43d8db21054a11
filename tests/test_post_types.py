from seo_notices.adapters.memory import InMemoryOptionsStore, StaticPostTypeRegistry
from seo_notices.core.post_types import (
    EvaluationCache,
    PostTypeDescriptor,
    filter_affected_types,
    has_custom_archive_slug,
    uses_default_templates,
)

DEFAULTS = {
    "title-ptarchive-book": "%%pt_plural%% Archive %%sep%% %%sitename%%",
    "metadesc-ptarchive-book": "",
    "title-ptarchive-event": "%%pt_plural%% Archive %%sep%% %%sitename%%",
    "metadesc-ptarchive-event": "",
    "title-ptarchive-page": "%%pt_plural%% Archive %%sep%% %%sitename%%",
    "metadesc-ptarchive-page": "",
}


def _options(**overrides):
    values = dict(DEFAULTS)
    values.update(overrides)
    return InMemoryOptionsStore(values, DEFAULTS)


def test_from_registration():
    assert PostTypeDescriptor.from_registration("book", "books") == PostTypeDescriptor(
        "book", has_archive=True, archive_slug_overridden=True
    )
    assert PostTypeDescriptor.from_registration("event", True) == PostTypeDescriptor(
        "event", has_archive=True, archive_slug_overridden=False
    )
    assert PostTypeDescriptor.from_registration("page", False) == PostTypeDescriptor("page")
    assert PostTypeDescriptor.from_registration("page", "") == PostTypeDescriptor("page")


def test_has_custom_archive_slug():
    assert has_custom_archive_slug(PostTypeDescriptor("book", True, True))
    assert not has_custom_archive_slug(PostTypeDescriptor("book", True, False))
    assert not has_custom_archive_slug(PostTypeDescriptor("book", False, True))


def test_default_archive_slug_is_never_affected():
    post_types = [PostTypeDescriptor.from_registration("event", True)]

    assert filter_affected_types(post_types, DEFAULTS, _options()) == []


def test_customized_title_excludes_type():
    options = _options(**{"title-ptarchive-book": "Our books %%sep%% %%sitename%%"})

    assert not uses_default_templates("book", DEFAULTS, options)
    assert filter_affected_types(
        [PostTypeDescriptor.from_registration("book", "books")], DEFAULTS, options
    ) == []


def test_customized_metadesc_excludes_type():
    options = _options(**{"metadesc-ptarchive-book": "All of our books."})

    assert not uses_default_templates("book", DEFAULTS, options)


def test_missing_default_counts_as_customized():
    defaults = {"title-ptarchive-book": DEFAULTS["title-ptarchive-book"]}

    assert not uses_default_templates("book", defaults, _options())


def test_unset_option_is_not_default():
    options = InMemoryOptionsStore({}, DEFAULTS)

    assert not uses_default_templates("book", DEFAULTS, options)


def test_filter_keeps_registry_order_and_skips_attachment():
    post_types = [
        PostTypeDescriptor.from_registration("event", "events"),
        PostTypeDescriptor.from_registration("attachment", "media"),
        PostTypeDescriptor.from_registration("page", False),
        PostTypeDescriptor.from_registration("book", "books"),
    ]

    assert filter_affected_types(post_types, DEFAULTS, _options()) == ["event", "book"]


def test_evaluation_cache_loads_once():
    options = _options()
    registry = StaticPostTypeRegistry([PostTypeDescriptor.from_registration("book", "books")])
    cache = EvaluationCache(options, registry)

    assert cache.affected_types == ["book"]
    registry.post_types.append(PostTypeDescriptor.from_registration("event", "events"))
    assert cache.affected_types == ["book"]

    assert EvaluationCache(options, registry).affected_types == ["book", "event"]
