"""The Maybe type and its combinators.

A `Maybe[V]` is either `Just(value)` or `Nothing()`. The combinators are plain
functions that case-split over both variants; the methods on the variant
classes are shorthand for chaining and delegate to those functions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeAlias, TypeVar, assert_never

from fs_maybe.errors import AbsentValueError

logger = logging.getLogger(__name__)

V = TypeVar('V')
Vo = TypeVar('Vo')


@dataclass(frozen=True)
class Just(Generic[V]):
    """A Maybe holding a value. Build it with `just()`."""

    value: V

    def bind(self, fn: 'BindFunction[V, Vo]') -> 'Maybe[Vo]':
        return bind(self, fn)

    def then(self, fn: 'BindFunction[V, Vo]') -> 'Maybe[Vo]':
        return bind(self, fn)

    def fmap(self, fn: Callable[[V], Vo]) -> 'Maybe[Vo]':
        return fmap(self, fn)

    def always(self, fn: Callable[[], 'Maybe[Vo]']) -> 'Maybe[Vo]':
        return always(self, fn)


@dataclass(frozen=True)
class Nothing(Generic[V]):
    """A Maybe holding no value. Build it with `nothing()`.

    It carries the value type of its sibling variant so that chains of
    combinators type-check without annotating every step.
    """

    def bind(self, fn: 'BindFunction[V, Vo]') -> 'Maybe[Vo]':
        return bind(self, fn)

    def then(self, fn: 'BindFunction[V, Vo]') -> 'Maybe[Vo]':
        return bind(self, fn)

    def fmap(self, fn: Callable[[V], Vo]) -> 'Maybe[Vo]':
        return fmap(self, fn)

    def always(self, fn: Callable[[], 'Maybe[Vo]']) -> 'Maybe[Vo]':
        return always(self, fn)


Maybe: TypeAlias = Just[V] | Nothing[V]

BindFunction: TypeAlias = Callable[[V], Maybe[Vo]]

MaybeStr: TypeAlias = Maybe[str]
MaybeInt: TypeAlias = Maybe[int]
MaybeFloat: TypeAlias = Maybe[float]
MaybeBool: TypeAlias = Maybe[bool]
MaybeBytes: TypeAlias = Maybe[bytes]
MaybeObject: TypeAlias = Maybe[object]
MaybeAny: TypeAlias = Maybe[Any]


def just(value: V) -> Maybe[V]:
    """Wrap `value` as-is, even when it is None or falsy."""
    return Just(value)


def nothing() -> Maybe[Any]:
    """Return the absent variant."""
    return Nothing()


def from_nullable(value: V | None) -> Maybe[V]:
    """Convert an optional value to a Maybe.

    None becomes Nothing; every other value, including 0, '' and False,
    becomes Just.
    """
    if value is None:
        return Nothing()
    return Just(value)


def is_just(maybe: Maybe[Any]) -> bool:
    match maybe:
        case Just():
            return True
        case Nothing():
            return False
        case _:
            assert_never(maybe)


def is_nothing(maybe: Maybe[Any]) -> bool:
    match maybe:
        case Just():
            return False
        case Nothing():
            return True
        case _:
            assert_never(maybe)


def from_just(maybe: Maybe[V]) -> V:
    """Return the value of a Just.

    Raises:
        AbsentValueError: If `maybe` is Nothing.
    """
    match maybe:
        case Just(value):
            return value
        case Nothing():
            logger.debug('from_just called on Nothing')
            raise AbsentValueError('argument to from_just was a Nothing')
        case _:
            assert_never(maybe)


def from_maybe(maybe: Maybe[V], default: V) -> V:
    """Return the value of a Just, or `default` for Nothing."""
    match maybe:
        case Just(value):
            return value
        case Nothing():
            return default
        case _:
            assert_never(maybe)


def fmap(maybe: Maybe[V], fn: Callable[[V], Vo]) -> Maybe[Vo]:
    """Apply `fn` to the value of a Just. `fn` is never called for Nothing."""
    match maybe:
        case Just(value):
            return Just(fn(value))
        case Nothing():
            return Nothing()
        case _:
            assert_never(maybe)


def bind(maybe: Maybe[V], fn: BindFunction[V, Vo]) -> Maybe[Vo]:
    """Feed the value of a Just to `fn` and return whatever Maybe it produces.

    Nothing short-circuits: `fn` is not called and the result is Nothing, so
    once any step of a chain is absent the rest of the chain stays absent.

    Args:
        maybe: The Maybe to bind against.
        fn: Function from the value to a new Maybe.

    Returns:
        The result of `fn` for a Just, Nothing otherwise.
    """
    match maybe:
        case Just(value):
            return fn(value)
        case Nothing():
            return Nothing()
        case _:
            assert_never(maybe)


then = bind


def always(maybe: Maybe[Any], fn: Callable[[], Maybe[Vo]]) -> Maybe[Vo]:
    """Call the zero-argument `fn` whatever the variant and return its result."""
    match maybe:
        case Just():
            return fn()
        case Nothing():
            return fn()
        case _:
            assert_never(maybe)


def chain(maybe: Maybe[Any], *fns: BindFunction[Any, Any]) -> Maybe[Any]:
    """Bind `maybe` through `fns` from left to right.

    Functions after the first Nothing are not called.

    Args:
        maybe: Initial Maybe.
        fns: Bind functions to apply in order.

    Returns:
        The Maybe produced by the last step, or Nothing.
    """
    result = maybe

    for i, fn in enumerate(fns, 1):
        if is_nothing(result):
            logger.debug(f'Chain stopped before step {i}/{len(fns)}: Nothing')
            break
        logger.debug(f'Chain step {i}/{len(fns)}: {getattr(fn, "__name__", fn)!s}')
        result = bind(result, fn)

    return result


def match(maybe: Maybe[V], on_just: Callable[[V], Vo], on_nothing: Callable[[], Vo]) -> Vo:
    """Unwrap `maybe` by calling exactly one of the two callbacks.

    Args:
        maybe: The Maybe to unwrap.
        on_just: Called with the value of a Just.
        on_nothing: Called with no arguments for Nothing.

    Returns:
        The return value of whichever callback ran.
    """
    match maybe:
        case Just(value):
            return on_just(value)
        case Nothing():
            return on_nothing()
        case _:
            assert_never(maybe)


unbox = match
