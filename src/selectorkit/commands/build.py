"""Command: build a compound selector from kind=value parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selectorkit.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorkit.commands._context import AppContext


def _split_parts(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Split each ``kind=value`` on its first ``=``."""
    parts: list[tuple[str, str]] = []
    for raw in value:
        kind, sep, text = raw.partition("=")
        if not sep or not kind:
            msg = f"expected KIND=VALUE, got {raw!r}"
            raise click.BadParameter(msg)
        parts.append((kind, text))
    return parts


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorkit build id=main class=container class=editable
  selectorkit build element=a 'attribute=href$=".png"' pseudo-class=focus
  selectorkit -q build element=p pseudo-element=first-line""",
)
@click.argument("parts", nargs=-1, required=True, callback=_split_parts)
@click.pass_obj
def build(app: AppContext, parts: list[tuple[str, str]]) -> None:
    """Build a compound selector from KIND=VALUE parts, in order.

    KIND is one of element, id, class, attribute, pseudo-class,
    pseudo-element.
    """
    from selectorkit.services.selector import SelectorService

    app.emit(SelectorService().build(parts))
