r"""Fluent builder for CSS compound and complex selectors.

A compound selector is written in canonical order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \----/\----/\----------/
              may occur several times

Element, id and pseudo-element may each occur at most once.  Compound
selectors are joined with one of the combinators ``' '``, ``'+'``, ``'~'``
or ``'>'``.
"""

from __future__ import annotations

import logging
from typing import Protocol

from selectorkit.builder.errors import (
    DuplicateSelectorError,
    InvalidCombinatorError,
    SelectorOrderError,
)
from selectorkit.builder.kinds import Combinator, PartKind

__all__ = ["SelectorBuilder", "Stringifiable"]

logger = logging.getLogger("selectorkit.builder")

_ALLOWED_COMBINATORS = frozenset(c.value for c in Combinator)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates a selector string one part at a time.

    Every part method validates the append, extends the text and returns the
    builder itself so calls can be chained.  A rejected append raises and
    leaves the builder untouched.
    """

    def __init__(self) -> None:
        self._text = ""
        self._seen: set[PartKind] = set()
        self._last: PartKind | None = None

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``; *value* is the full expression, e.g. ``href$=".png"``."""
        return self._append(PartKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a part of the given *kind*; same rules as the named methods."""
        return self._append(kind, value)

    # --- combination ----------------------------------------------------------

    def combine(
        self,
        left: Stringifiable,
        combinator: str | Combinator,
        right: Stringifiable,
    ) -> SelectorBuilder:
        """Append ``left <combinator> right`` to the current text.

        The combinator is always surrounded by single spaces, so the
        descendant combinator renders as three spaces.
        """
        symbol = combinator.value if isinstance(combinator, Combinator) else combinator
        if not isinstance(symbol, str) or symbol not in _ALLOWED_COMBINATORS:
            logger.debug("Rejected combinator %r", combinator)
            raise InvalidCombinatorError(combinator)
        self._text += f"{left.stringify()} {symbol} {right.stringify()}"
        logger.debug("Combined selectors with %r: %s", symbol, self._text)
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"

    # --- validation -----------------------------------------------------------

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        self._check(kind)
        self._seen.add(kind)
        self._last = kind
        self._text += kind.render(value)
        return self

    def _check(self, kind: PartKind) -> None:
        if kind.singleton and kind in self._seen:
            logger.debug("Rejected duplicate %s in %r", kind.label, self._text)
            raise DuplicateSelectorError(kind)
        if self._last is not None and kind.rank < self._last.rank:
            logger.debug(
                "Rejected %s after %s in %r", kind.label, self._last.label, self._text
            )
            raise SelectorOrderError(kind, self._last)
