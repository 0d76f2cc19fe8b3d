"""fs-maybe: an optional-value type with monadic combinators."""

from importlib.metadata import version, PackageNotFoundError

from fs_maybe.errors import AbsentValueError
from fs_maybe.maybe import (
    BindFunction,
    Just,
    Maybe,
    MaybeAny,
    MaybeBool,
    MaybeBytes,
    MaybeFloat,
    MaybeInt,
    MaybeObject,
    MaybeStr,
    Nothing,
    always,
    bind,
    chain,
    fmap,
    from_just,
    from_maybe,
    from_nullable,
    is_just,
    is_nothing,
    just,
    match,
    nothing,
    then,
    unbox,
)

try:
    __version__ = version('fs-maybe')
except PackageNotFoundError:
    # Fallback for development environment
    __version__ = 'unknown'

__all__ = [
    'AbsentValueError',
    'BindFunction',
    'Just',
    'Maybe',
    'MaybeAny',
    'MaybeBool',
    'MaybeBytes',
    'MaybeFloat',
    'MaybeInt',
    'MaybeObject',
    'MaybeStr',
    'Nothing',
    'always',
    'bind',
    'chain',
    'fmap',
    'from_just',
    'from_maybe',
    'from_nullable',
    'is_just',
    'is_nothing',
    'just',
    'match',
    'nothing',
    'then',
    'unbox',
]
