"""fs-maybe-examples demo"""

import logging
from pathlib import Path

import typer
from returns.result import Failure

from fs_maybe import AbsentValueError
from fs_maybe_examples.config import resolve_config
from fs_maybe_examples.find import (
    exceptions_instead_of_maybe,
    find_or_default,
    find_or_raise,
    find_with_maybe,
    monadic_lookup,
    no_maybe,
)

logger = logging.getLogger(__name__)


def execute(config: Path | None):
    config_result = resolve_config(config)
    if isinstance(config_result, Failure):
        typer.echo(str(config_result.failure()), err=True)
        raise typer.Exit(code=1)
    cfg = config_result.unwrap()

    logger.debug(f'Numbers: {cfg.numbers}')
    lookup_args = (cfg.numbers, cfg.target, cfg.offset, cfg.decrement, cfg.default)

    typer.echo(f'find_with_maybe: {find_with_maybe(cfg.numbers, cfg.target)}')
    typer.echo(f'find_or_default: {find_or_default(cfg.numbers, cfg.target, cfg.default)}')
    try:
        typer.echo(f'find_or_raise: {find_or_raise(cfg.numbers, cfg.target)}')
    except AbsentValueError as e:
        typer.echo(f'find_or_raise: [ERROR] {e}')
    typer.echo(f'monadic_lookup: {monadic_lookup(*lookup_args)}')
    typer.echo(f'no_maybe: {no_maybe(*lookup_args)}')
    typer.echo(f'exceptions_instead_of_maybe: {exceptions_instead_of_maybe(*lookup_args)}')
