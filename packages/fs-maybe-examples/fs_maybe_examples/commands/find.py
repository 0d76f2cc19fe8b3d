"""fs-maybe-examples find"""

from pathlib import Path

import typer
from returns.result import Failure

from fs_maybe import AbsentValueError
from fs_maybe_examples.config import resolve_config
from fs_maybe_examples.find import find_or_raise, find_with_maybe


def execute(config: Path | None, target: int | None, strict: bool):
    config_result = resolve_config(config)
    if isinstance(config_result, Failure):
        typer.echo(str(config_result.failure()), err=True)
        raise typer.Exit(code=1)
    cfg = config_result.unwrap()

    search_for = cfg.target if target is None else target

    if not strict:
        typer.echo(find_with_maybe(cfg.numbers, search_for))
        return

    try:
        value = find_or_raise(cfg.numbers, search_for)
    except AbsentValueError as e:
        typer.echo(f'[ERROR] {search_for} not found: {e}', err=True)
        raise typer.Exit(code=1)

    typer.echo(f'Found value: {value}')
