"""Typer-based command line interface for the strftime time range tool."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .models import OutputMode
from .rendering.output import OutputError, render_output
from .services import (
    FormatService,
    InvalidFormatError,
    TimeArgumentError,
    TimeResolver,
    build_services,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Print a start/end time range in a fixed or custom format.",
    add_completion=False,
)

USAGE = """\
Usage: strftime-cli <format_id> <start_time> <end_time> [-o=json|start|end]
       strftime-cli 6 <template> <start_time> <end_time> [-o=json|start|end]

Format Identifiers:
  1: ISO 8601 (e.g., 2006-01-02T15:04:05)
  2: American Format (e.g., 01-02-2006)
  3: European Format (e.g., 02-01-2006)
  4: RFC 2822 (e.g., Mon, 02 Jan 2006 15:04:05 -0700)
  5: Unix Timestamp (seconds since Unix epoch)
  6: Custom strftime format (given before <start_time>)

Time Arguments:
  - Relative times: '+' or '-', a number and a unit.
    Units: 'm' (minutes), 'h' (hours), 'd' (days), 'w' (weeks), 'M' (months)
    Examples: -1d (1 day ago), +1w (1 week from now)
  - Keywords: 'now' (current moment) and 'today' (start of current day)

Options:
  -o=json, --output=json    JSON object with "start" and "end" keys
  -o=start, --output=start  start value only
  -o=end, --output=end      end value only
  --verbose                 log debug details to stderr
  --help                    show the command help

Examples:
  strftime-cli 1 -1d +1d
  strftime-cli 3 today +1w
  strftime-cli 6 "%Y/%m/%d %H:%M:%S" -2h now
  strftime-cli 5 today now -o=json"""


@dataclass(slots=True)
class AppState:
    console: Console
    resolver: TimeResolver
    formats: FormatService


def get_state(ctx: typer.Context) -> AppState:
    if ctx.obj is None:
        resolver, formats = build_services()
        ctx.obj = AppState(
            console=Console(soft_wrap=True, highlight=False, emoji=False),
            resolver=resolver,
            formats=formats,
        )
    return ctx.obj


def _strip_equals(value: Optional[str]) -> Optional[str]:
    # "-o=json" reaches the option as "=json".
    if value is not None and value.startswith("="):
        return value[1:]
    return value


def _split_output_flag(args: list[str]) -> tuple[list[str], Optional[str]]:
    """Pull ``-o=MODE``, ``-oMODE`` and ``-o MODE`` out of the positional tokens.

    Click would otherwise read a time token such as ``-5o`` as a cluster of
    short flags, so ``-o`` is not declared as a Click option.
    """
    positional: list[str] = []
    output: Optional[str] = None
    tokens = iter(args)
    for token in tokens:
        if token == "-o":
            output = next(tokens, "")
        elif token.startswith("-o"):
            output = _strip_equals(token[2:])
        else:
            positional.append(token)
    return positional, output


def _exit_with_usage(state: AppState) -> None:
    state.console.print(USAGE, markup=False)
    raise typer.Exit(code=1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    args: Optional[list[str]] = typer.Argument(
        None,
        metavar="FORMAT_ID [TEMPLATE] START END",
        help="Format identifier (1-6), an optional custom template for 6, then start and end times.",
        show_default=False,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        help=f"Output mode: {', '.join(OutputMode.list())}. Also accepted as -o=MODE.",
        callback=_strip_equals,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug details to stderr."),
) -> None:
    _configure_logging(verbose)
    state = get_state(ctx)
    args, short_output = _split_output_flag(args or [])
    if short_output is not None:
        output = short_output
    logger.debug("Arguments: %s, output: %s", args, output)

    if len(args) not in (3, 4):
        _exit_with_usage(state)
    mode: OutputMode | None = None
    if output is not None:
        if output not in OutputMode.list():
            _exit_with_usage(state)
        mode = OutputMode(output)

    try:
        spec = state.formats.select(args[0], template=args[1])
    except InvalidFormatError as exc:
        state.console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    expected = 4 if spec.takes_template_argument else 3
    if len(args) != expected:
        _exit_with_usage(state)
    start_arg, end_arg = args[-2], args[-1]

    reference = state.resolver.now()
    try:
        start = state.resolver.resolve(start_arg, reference)
    except TimeArgumentError as exc:
        state.console.print(f"[red]Error parsing start time:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    try:
        end = state.resolver.resolve(end_arg, reference)
    except TimeArgumentError as exc:
        state.console.print(f"[red]Error parsing end time:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    pair = state.formats.format_pair(spec, start, end)
    try:
        text = render_output(pair, mode)
    except OutputError as exc:
        state.console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    typer.echo(text)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
