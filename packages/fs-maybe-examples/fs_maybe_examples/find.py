"""Number lookups written with and without Maybe."""

import logging
from typing import Sequence

from fs_maybe import Maybe, chain, from_just, from_maybe, just, match, nothing

logger = logging.getLogger(__name__)


def find(numbers: Sequence[int], target: int) -> Maybe[int]:
    """Search `numbers` for `target`.

    Presence is decided by whether an element matched, so a found 0 is Just(0).

    Args:
        numbers: Numbers to search.
        target: Value to look for.

    Returns:
        Just the matching element, or Nothing if there is none.
    """
    for element in numbers:
        if element == target:
            logger.debug(f'Found {target}')
            return just(element)
    logger.debug(f'{target} not found in {len(numbers)} number(s)')
    return nothing()


def find_with_maybe(numbers: Sequence[int], target: int) -> str:
    """Describe the lookup of `target` by handling both variants."""
    return match(
        find(numbers, target),
        lambda value: f'Found value: {value}',
        lambda: f'Could not find value: {target}',
    )


def find_or_default(numbers: Sequence[int], target: int, default: int) -> int:
    return from_maybe(find(numbers, target), default)


def find_or_raise(numbers: Sequence[int], target: int) -> int:
    """Return the found value.

    Raises:
        AbsentValueError: If `target` is not in `numbers`.
    """
    return from_just(find(numbers, target))


def monadic_lookup(
    numbers: Sequence[int],
    start: int,
    offset: int,
    decrement: int,
    default: int,
) -> int:
    """Find `start`, add `offset`, find that, subtract `decrement`.

    Every step after the first missing lookup is skipped and `default` is
    returned instead.

    Args:
        numbers: Numbers to search.
        start: First value to look up.
        offset: Added to the first value before the second lookup.
        decrement: Subtracted from the second value.
        default: Result when either lookup fails.

    Returns:
        The second found value minus `decrement`, or `default`.
    """
    result = chain(
        find(numbers, start),
        lambda value: just(value + offset),
        lambda value: find(numbers, value),
        lambda value: just(value - decrement),
    )
    return from_maybe(result, default)


def no_maybe(
    numbers: Sequence[int],
    start: int,
    offset: int,
    decrement: int,
    default: int,
) -> int:
    """Same lookup as `monadic_lookup`, written with explicit None checks."""
    found = next((n for n in numbers if n == start), None)
    if found is not None:
        found = next((n for n in numbers if n == found + offset), None)
        if found is not None:
            return found - decrement
    return default


def exceptions_instead_of_maybe(
    numbers: Sequence[int],
    start: int,
    offset: int,
    decrement: int,
    default: int,
) -> int:
    """Same lookup as `monadic_lookup`, written with exceptions."""
    try:
        found = numbers[numbers.index(start)]
        found = numbers[numbers.index(found + offset)]
        return found - decrement
    except ValueError:
        return default
