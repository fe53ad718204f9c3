"""CLI command: selectorkit rectangle -- JSON round-trip of a Rectangle."""

from __future__ import annotations

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.serialization import Rectangle, from_json, to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: SelectorkitConfig, width: float, height: float) -> None:
    """Print the JSON form of a WIDTH x HEIGHT rectangle and its area."""
    text = to_json(Rectangle(width, height), indent=config.json_indent)
    restored = from_json(Rectangle, text)
    click.echo(text)
    click.echo(f"Area: {restored.area():g}")
