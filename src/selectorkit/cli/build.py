"""CLI commands: selectorkit build / combine -- assemble selectors from parts."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import PartKind, SelectorBuilder, SelectorError, css_selector_builder


class PartParam(click.ParamType):
    """A ``kind=value`` pair such as ``class=container`` or ``attr=href$=".png"``."""

    name = "part"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        kind, sep, text = value.partition("=")
        if not sep:
            self.fail(f"{value!r} is not of the form kind=value", param, ctx)
        try:
            return PartKind.from_label(kind.strip()), text
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


PART = PartParam()


def _assemble(parts: tuple[tuple[PartKind, str], ...]) -> SelectorBuilder:
    builder = SelectorBuilder()
    for kind, value in parts:
        builder.add(kind, value)
    return builder


@click.command()
@click.argument("parts", nargs=-1, required=True, type=PART)
def build(parts: tuple[tuple[PartKind, str], ...]) -> None:
    """Build a compound selector from PARTS, applied in order.

    Each part is KIND=VALUE where KIND is one of element, id, class, attr,
    pseudo-class or pseudo-element.
    """
    try:
        selector = _assemble(parts)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
@click.option("--left", "left", multiple=True, required=True, type=PART, help="Part of the left selector")
@click.option("--right", "right", multiple=True, required=True, type=PART, help="Part of the right selector")
@click.argument("combinator")
def combine(
    left: tuple[tuple[PartKind, str], ...],
    right: tuple[tuple[PartKind, str], ...],
    combinator: str,
) -> None:
    """Join two compound selectors with COMBINATOR (' ', '+', '~' or '>')."""
    try:
        selector = css_selector_builder.combine(
            _assemble(left), combinator, _assemble(right)
        )
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
