"""Part kinds and combinators understood by the selector builder."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """A simple-selector kind, in canonical CSS order.

    Each member carries its rank in the canonical order, whether it may occur
    only once per compound selector, and the template used to render it.
    """

    ELEMENT = ("element", 0, True, "{}")
    ID = ("id", 1, True, "#{}")
    CLASS = ("class", 2, False, ".{}")
    ATTRIBUTE = ("attribute", 3, False, "[{}]")
    PSEUDO_CLASS = ("pseudo-class", 4, False, ":{}")
    PSEUDO_ELEMENT = ("pseudo-element", 5, True, "::{}")

    def __init__(self, label: str, rank: int, singleton: bool, template: str):
        self.label = label
        self.rank = rank
        self.singleton = singleton
        self.template = template

    def render(self, value: str) -> str:
        return self.template.format(value)

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        """Look up a kind by its CSS-style label (``attr`` is accepted too)."""
        if label == "attr":
            return cls.ATTRIBUTE
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown selector part kind: {label!r}")


class Combinator(Enum):
    """Relationship between two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
