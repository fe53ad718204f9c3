"""selectorkit: fluent builder for CSS selectors."""

__version__ = "0.1.0"

from selectorkit.builder import (  # noqa: E402
    Combinator,
    DuplicateSelectorError,
    InvalidCombinatorError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorFactory,
    SelectorOrderError,
    css_selector_builder,
)

__all__ = [
    "__version__",
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
