"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.builder.kinds import PartKind


class SelectorError(Exception):
    """Base class for every error raised while building a selector."""


class DuplicateSelectorError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind):
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector"
        )


class SelectorOrderError(SelectorError):
    """Raised when a part would break the canonical selector order."""

    def __init__(self, kind: PartKind, after: PartKind):
        self.kind = kind
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorError):
    """Raised when ``combine`` receives an unknown combinator symbol."""

    def __init__(self, combinator: object):
        self.combinator = combinator
        super().__init__(
            'Combinator parsing error! Only " ", +, ~, > combinators are '
            "allowed to use"
        )
