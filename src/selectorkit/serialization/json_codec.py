"""JSON round-trip helpers that reattach a Python class to parsed data."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _default(value: Any) -> Any:
    """Fallback encoder for dataclasses and plain objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (no spaces after separators) unless *indent* is given.
    """
    if indent is None:
        return json.dumps(value, default=_default, separators=(",", ":"))
    return json.dumps(value, default=_default, indent=indent)


def from_json(shape: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *shape*.

    The parsed keys become instance attributes and ``shape.__init__`` is not
    called, so *shape*'s methods operate on whatever the document contained.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        )
    obj = shape.__new__(shape)
    for key, value in data.items():
        setattr(obj, key, value)
    return obj
