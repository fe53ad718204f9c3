from selectorkit.builder.errors import (
    DuplicateSelectorError,
    InvalidCombinatorError,
    SelectorError,
    SelectorOrderError,
)
from selectorkit.builder.factory import SelectorFactory, css_selector_builder
from selectorkit.builder.kinds import Combinator, PartKind
from selectorkit.builder.selector import SelectorBuilder

__all__ = [
    "SelectorBuilder",
    "SelectorFactory",
    "css_selector_builder",
    "PartKind",
    "Combinator",
    "SelectorError",
    "DuplicateSelectorError",
    "SelectorOrderError",
    "InvalidCombinatorError",
]
