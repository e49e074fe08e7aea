"""Click command line rendering events with :class:`LogFormatter`.

Purpose
-------
Give operators a quick way to preview how an event will look for a given set
of display options, and expose package metadata for packaging smoke tests.

Contents
--------
* :func:`cli` - command group with ``--version`` and ``--use-dotenv``.
* :func:`info` / :func:`render` - subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import logging
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .adapters import RichConsoleSink, StreamSink
from .domain import EventId, FormatOptions, LogEvent, LogLevel
from .lib_log_to import log_to, summary_info

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _parse_level(_ctx: click.Context, _param: click.Parameter, value: str | None) -> LogLevel | None:
    if value is None:
        return None
    try:
        return LogLevel.from_name(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _parse_options(_ctx: click.Context, _param: click.Parameter, value: str | None) -> FormatOptions | None:
    if value is None:
        return None
    try:
        return FormatOptions.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group(context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.name, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading settings (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Format structured log events as text records."""

    if use_dotenv is None:
        use_dotenv = log_config.env_bool(log_config.DOTENV_ENV_VAR, default=False)
    if use_dotenv:
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command(context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command(context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.option("--level", "level", default="information", show_default=True, callback=_parse_level, help="Event level.")
@click.option("--event-id", type=int, default=0, show_default=True, help="Numeric event id.")
@click.option("--event-name", default="", help="Dotted event name, e.g. Database.Command.Executing.")
@click.option("--code", default=None, help="Display code printed before [id]; defaults to the event name.")
@click.option(
    "--options",
    "options",
    default=None,
    callback=_parse_options,
    help=f"Comma separated display options (default: ${log_config.OPTIONS_ENV_VAR} or DEFAULT).",
)
@click.option("--single-line", is_flag=True, help="Add SINGLE_LINE to the display options.")
@click.option(
    "--minimum-level",
    default=None,
    callback=_parse_level,
    help=f"Drop events below this level (default: ${log_config.LEVEL_ENV_VAR} or debug).",
)
@click.option("--plain", is_flag=True, help="Write to stdout directly instead of through Rich.")
def render(
    message: str,
    level: LogLevel,
    event_id: int,
    event_name: str,
    code: str | None,
    options: FormatOptions | None,
    single_line: bool,
    minimum_level: LogLevel | None,
    plain: bool,
) -> None:
    """Render MESSAGE (use - to read stdin) as one formatted record."""

    if message == "-":
        with click.open_file("-") as stream:
            message = stream.read().rstrip("\n")
    try:
        resolved_options = options if options is not None else log_config.options_from_env()
        resolved_level = minimum_level if minimum_level is not None else log_config.level_from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if single_line:
        resolved_options |= FormatOptions.SINGLE_LINE

    sink = StreamSink() if plain else RichConsoleSink()
    formatter = log_to(sink, options=resolved_options, minimum_level=resolved_level)
    identity = EventId(event_id, event_name)
    if not formatter.should_log(identity, level):
        logger.debug("Event %s at %s filtered out", identity, level.name)
        return
    formatter.log(LogEvent(level, identity, message, code))


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` and return its exit code instead of exiting.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exit_:
        return exit_.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
