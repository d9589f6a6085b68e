"""Command: render a selector document from a JSON file."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from selectorkit.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorkit.commands._context import AppContext


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorkit render selector.json
  echo '{"parts": [{"kind": "element", "value": "a"}]}' | selectorkit render -
  selectorkit --json render selector.json""",
)
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def render(app: AppContext, source: BinaryIO) -> None:
    """Render a UTF-8 JSON selector document (use - for stdin)."""
    from selectorkit.services.selector import SelectorService

    app.emit(SelectorService().render_json(source.read()))
