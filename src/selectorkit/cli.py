"""Root CLI group for selectorkit with global flags and command registration."""

from __future__ import annotations

import click

from selectorkit import __version__
from selectorkit.commands import register_commands
from selectorkit.commands._base import SelectorGroup
from selectorkit.commands._context import AppContext
from selectorkit.config.settings import SelectorSettings


@click.group(
    cls=SelectorGroup,
    invoke_without_command=True,
    examples="""\
  selectorkit build element=div id=main class=container
  selectorkit render selector.json""",
)
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the selector.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """selectorkit — build CSS selectors from composable parts."""
    ctx.ensure_object(dict)
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags fall through to env vars and TOML.
    settings = SelectorSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
