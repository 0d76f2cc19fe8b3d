"""Conversions between fs-maybe and the `returns` library's Maybe container."""

from typing import TypeVar, assert_never

from returns import maybe as returns_maybe

from fs_maybe.maybe import Just, Maybe, Nothing

V = TypeVar('V')


def to_returns(maybe: Maybe[V]) -> returns_maybe.Maybe[V]:
    """Convert a Maybe to a `returns` Maybe.

    Just(v) becomes Some(v) and Nothing() becomes the `returns` Nothing.
    """
    match maybe:
        case Just(value):
            return returns_maybe.Some(value)
        case Nothing():
            return returns_maybe.Nothing
        case _:
            assert_never(maybe)


def from_returns(container: returns_maybe.Maybe[V]) -> Maybe[V]:
    """Convert a `returns` Maybe to a Maybe.

    Presence follows the container, not the payload: Some(None) becomes
    Just(None).
    """
    match container:
        case returns_maybe.Some(value):
            return Just(value)
        case returns_maybe.Nothing:
            return Nothing()
        case _:
            assert_never(container)  # pyright: ignore[reportArgumentType]
