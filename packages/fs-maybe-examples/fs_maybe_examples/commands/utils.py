import logging

import typer

import fs_maybe
from fs_maybe_examples import __version__

PACKAGE_LOGGERS = ('fs_maybe', 'fs_maybe_examples')


def setup_logging(verbose: bool = False) -> None:
    """Route fs-maybe log records to stderr.

    Only the fs-maybe loggers change level; DEBUG shows each chain step and
    every lookup.

    Args:
        verbose: If True, set the package loggers to DEBUG; otherwise INFO.
    """
    logging.basicConfig(format='%(levelname)s: %(name)s: %(message)s')
    level = logging.DEBUG if verbose else logging.INFO
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)


def version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f'fs-maybe version {fs_maybe.__version__}')
    typer.echo(f'fs-maybe-examples version {__version__}')
    raise typer.Exit()
