"""fs-maybe-examples: small programs showing how the Maybe type is used.

The `find` module compares a Maybe-based lookup against the same lookup written
with explicit None checks and with exceptions. The `cli` module exposes those
comparisons as the `fs-maybe-examples` command.
"""

from importlib.metadata import version, PackageNotFoundError

from fs_maybe_examples.find import (
    exceptions_instead_of_maybe,
    find,
    find_or_default,
    find_or_raise,
    find_with_maybe,
    monadic_lookup,
    no_maybe,
)

try:
    __version__ = version('fs-maybe')
except PackageNotFoundError:
    # Fallback for development environment
    __version__ = 'unknown'

__all__ = [
    'exceptions_instead_of_maybe',
    'find',
    'find_or_default',
    'find_or_raise',
    'find_with_maybe',
    'monadic_lookup',
    'no_maybe',
]
