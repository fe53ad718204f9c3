"""Example payload types for the JSON helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.area()
        200
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
