"""Tests for the tag dictionary and the inheritance tag definitions."""

import pytest

from doclet_inherit.dependency_registry import DependencyRegistry
from doclet_inherit.doclet import Doclet
from doclet_inherit.first_word_of import first_word_of
from doclet_inherit.inherit_tags import define_inherit_tags
from doclet_inherit.load_config import load_config
from doclet_inherit.pending_ancestor import InheritMode
from doclet_inherit.tag import Tag
from doclet_inherit.tag_dictionary import TagDefinition, TagDictionary


@pytest.fixture
def tag_setup() -> tuple[TagDictionary, DependencyRegistry]:
    """Fixture providing a dictionary with the inheritance tags defined."""
    dictionary = TagDictionary()
    registry = DependencyRegistry()
    define_inherit_tags(dictionary, registry, load_config(None))
    return dictionary, registry


def test_first_word_of() -> None:
    """Test extraction of the tag target."""
    assert first_word_of("myFunction") == "myFunction"
    assert first_word_of("  Foo#bar some text") == "Foo#bar"
    assert first_word_of("") == ""
    assert first_word_of(None) == ""


def test_handlers_fire_in_order() -> None:
    """Verify that handlers run in tag order and unknown tags are ignored."""
    fired: list[str | None] = []
    dictionary = TagDictionary()
    dictionary.define_tag(
        "Thing", TagDefinition(lambda d, t: fired.append(t.value))
    )
    doclet = Doclet(
        tags=[Tag("thing", "1"), Tag("unknown", "x"), Tag("THING", "2")]
    )
    dictionary.apply(doclet)
    assert fired == ["1", "2"]


def test_inheritparams(tag_setup: tuple[TagDictionary, DependencyRegistry]) -> None:
    """Verify that @inheritparams records a params-only dependency."""
    dictionary, _ = tag_setup
    doclet = Doclet(longname="f", tags=[Tag("inheritparams", "myFunction extra")])
    dictionary.apply(doclet)

    assert [(p.identity, p.mode) for p in doclet.pending_ancestors] == [
        ("myFunction", InheritMode.PARAMS_ONLY)
    ]
    assert doclet.inherit_params_only
    assert doclet.see == []


def test_inheritdoc(tag_setup: tuple[TagDictionary, DependencyRegistry]) -> None:
    """Verify that @inheritdoc records a full dependency and a @see link."""
    dictionary, _ = tag_setup
    doclet = Doclet(
        longname="f",
        see=["myFunction"],
        tags=[Tag("inheritparams", "a"), Tag("inheritdoc", "myFunction")],
    )
    dictionary.apply(doclet)

    assert [p.mode for p in doclet.pending_ancestors] == [
        InheritMode.PARAMS_ONLY,
        InheritMode.FULL,
    ]
    assert not doclet.inherit_params_only
    assert doclet.see == ["myFunction"]


def test_override_records_code_id(
    tag_setup: tuple[TagDictionary, DependencyRegistry],
) -> None:
    """Verify that @override is keyed on the code id."""
    dictionary, registry = tag_setup
    doclet = Doclet(name="doStuff", code_id="node-7", tags=[Tag("override")])
    dictionary.apply(doclet)
    assert registry.pending_overrides == {"node-7"}
    assert doclet.pending_ancestors == []


def test_override_without_code_id_is_ignored(
    tag_setup: tuple[TagDictionary, DependencyRegistry],
) -> None:
    """Verify that @override is a no-op for doclets without a code id."""
    dictionary, registry = tag_setup
    dictionary.apply(Doclet(name="doStuff", tags=[Tag("override")]))
    assert registry.pending_overrides == set()


def test_malformed_tags_are_ignored(
    tag_setup: tuple[TagDictionary, DependencyRegistry],
) -> None:
    """Verify that tags with a missing or unexpected value are skipped."""
    dictionary, registry = tag_setup
    doclet = Doclet(
        longname="f",
        code_id="node-1",
        tags=[Tag("inheritdoc", "   "), Tag("inheritparams"), Tag("override", "X")],
    )
    dictionary.apply(doclet)

    assert doclet.pending_ancestors == []
    assert doclet.see == []
    assert registry.pending_overrides == set()
    assert [i["tag"] for i in dictionary.ignored] == [
        "inheritdoc",
        "inheritparams",
        "override",
    ]


def test_tag_titles_are_configurable() -> None:
    """Verify that the inheritance tags can be renamed."""
    config = load_config(None)
    config["tags"]["override"] = "overrides"
    dictionary = TagDictionary()
    registry = DependencyRegistry()
    define_inherit_tags(dictionary, registry, config)

    dictionary.apply(Doclet(code_id="a", tags=[Tag("override")]))
    dictionary.apply(Doclet(code_id="b", tags=[Tag("overrides")]))
    assert registry.pending_overrides == {"b"}
