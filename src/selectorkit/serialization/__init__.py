"""JSON serialization helpers and example payloads."""

from selectorkit.serialization.json_codec import from_json, to_json
from selectorkit.serialization.shapes import Rectangle

__all__ = ["to_json", "from_json", "Rectangle"]
