"""Tests for the selector factory facade."""

import pytest

from selectorkit import css_selector_builder
from selectorkit.builder import (
    DuplicateSelectorError,
    InvalidCombinatorError,
    SelectorBuilder,
    SelectorFactory,
    SelectorOrderError,
)


@pytest.fixture
def builder() -> SelectorFactory:
    return css_selector_builder


class TestFactoryEntryPoints:
    def test_each_call_returns_fresh_builder(self, builder):
        a = builder.element("a")
        b = builder.element("b")
        assert a is not b
        assert a.stringify() == "a"
        assert b.stringify() == "b"

    def test_entry_points_return_builders(self, builder):
        for result in (
            builder.element("a"),
            builder.id("x"),
            builder.class_("c"),
            builder.attr("href"),
            builder.attribute("href"),
            builder.pseudo_class("hover"),
            builder.pseudo_element("after"),
        ):
            assert isinstance(result, SelectorBuilder)

    def test_rendering_per_entry_point(self, builder):
        assert builder.id("x").stringify() == "#x"
        assert builder.class_("c").stringify() == ".c"
        assert builder.attr("href").stringify() == "[href]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_interleaved_chains_do_not_interfere(self, builder):
        first = builder.id("main")
        second = builder.id("other")
        first.class_("a")
        second.class_("b")
        assert first.stringify() == "#main.a"
        assert second.stringify() == "#other.b"

    def test_new_factory_instances_behave_the_same(self):
        assert SelectorFactory().element("p").stringify() == "p"


class TestDocumentedExamples:
    def test_id_with_classes(self, builder):
        assert (
            builder.id("main").class_("container").class_("editable").stringify()
            == "#main.container.editable"
        )

    def test_element_attribute_pseudo_class(self, builder):
        assert (
            builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
            == 'a[href$=".png"]:focus'
        )

    def test_duplicate_id(self, builder):
        with pytest.raises(DuplicateSelectorError):
            builder.id("main").id("other")

    def test_class_before_element(self, builder):
        with pytest.raises(SelectorOrderError):
            builder.class_("x").element("a")

    def test_invalid_combinator(self, builder):
        with pytest.raises(InvalidCombinatorError):
            builder.combine(builder.element("div"), "*", builder.element("span"))

    def test_nested_combine(self, builder):
        result = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.combine(builder.element("table").id("data"), "~", builder.element("tr")),
        )
        assert result.stringify() == "div#main + table#data ~ tr"

    def test_deep_nested_combine_with_descendant(self, builder):
        result = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_pseudo_element_chain(self, builder):
        result = builder.element("p").pseudo_class("first-of-type").pseudo_element(
            "first-letter"
        )
        assert result.stringify() == "p:first-of-type::first-letter"
