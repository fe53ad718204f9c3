"""Stateless facade that starts every selector chain on a fresh builder."""

from __future__ import annotations

from selectorkit.builder.kinds import Combinator
from selectorkit.builder.selector import SelectorBuilder, Stringifiable

__all__ = ["SelectorFactory", "css_selector_builder"]


class SelectorFactory:
    """Entry point mirroring the builder API.

    Each call creates a new :class:`SelectorBuilder`, so independent
    expressions such as ``factory.element("a")`` and ``factory.id("x")``
    never share state.
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        left: Stringifiable,
        combinator: str | Combinator,
        right: Stringifiable,
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)


css_selector_builder = SelectorFactory()
