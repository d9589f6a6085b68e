"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output), for pipes
(--quiet: the bare selector), or for machines (--json).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from selectorkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from selectorkit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags resolved from CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int = 120


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, settings)


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    selector = result.data.get("selector")
    if selector is not None:
        return str(selector)
    return f"OK: {result.op}"


def _value_text(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=not settings.color, width=settings.width)
    if result.ok:
        _render_ok(console, result)
    else:
        _render_error(console, result, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def _render_ok(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "sk.ok"), ("  " + result.op, "sk.op")), soft_wrap=True)
    for key, value in result.data.items():
        style = "sk.selector" if key == "selector" else ""
        line = Text.assemble((f"  {key}: ", "sk.key"), (_value_text(value), style))
        console.print(line, soft_wrap=True)


def _render_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "sk.error"), ("  " + result.op, "sk.op"), f" — {message}"),
        soft_wrap=True,
    )
    if error is None:
        return
    console.print(Text.assemble(("  code: ", "sk.key"), (error.code, "sk.code")), soft_wrap=True)
    if verbose:
        for key, value in error.detail.items():
            line = Text.assemble((f"  {key}: ", "sk.key"), _value_text(value))
            console.print(line, soft_wrap=True)
