"""CLI application for fs-maybe-examples."""

from pathlib import Path
from typing import Annotated

import typer

from fs_maybe_examples.commands import demo as demo_command
from fs_maybe_examples.commands import find as find_command
from fs_maybe_examples.commands import utils

app = typer.Typer(no_args_is_help=True)


def help_callback(ctx: typer.Context, value: bool) -> None:
    """Display help and exit.

    Args:
        ctx: Typer context.
        value: If True, display help and exit.
    """
    if value:
        typer.echo(ctx.get_help())
        raise typer.Exit()


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        '-c',
        '--config',
        help='Path to config file.',
        dir_okay=False,
        resolve_path=True,
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        '-V',
        '--verbose',
        help='Enable verbose output.',
    ),
]
HelpOption = Annotated[
    bool,
    typer.Option(
        '-h',
        '--help',
        callback=help_callback,
        is_eager=True,
        help='Show this message and exit.',
    ),
]


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            '-v',
            '--version',
            callback=utils.version_callback,
            is_eager=True,
            help='Show version and exit.',
        ),
    ] = False,
    _help: HelpOption = False,
) -> None:
    """fs-maybe-examples: lookups written with and without Maybe."""


@app.command()
def find(
    config: ConfigOption = None,
    target: Annotated[
        int | None,
        typer.Option(
            '-t',
            '--target',
            help='Value to look for. Defaults to the configured target.',
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            '--strict',
            help='Fail with exit code 1 when the value is not found.',
        ),
    ] = False,
    verbose: VerboseOption = False,
    _help: HelpOption = False,
) -> None:
    """Look up a single value in the configured numbers."""
    utils.setup_logging(verbose)
    find_command.execute(config, target, strict)


@app.command()
def demo(
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    _help: HelpOption = False,
) -> None:
    """Run every lookup variant and print the results."""
    utils.setup_logging(verbose)
    demo_command.execute(config)
