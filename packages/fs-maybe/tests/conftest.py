"""Shared fixtures and helpers for fs-maybe tests."""

from typing import Any, Callable

import pytest


# ---------------------------------------------------------------------------
# Call-counting stubs
# ---------------------------------------------------------------------------


class CallCounter:
    """Wraps a callable and records every call made through it."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter():
    """Factory for call-counting wrappers."""
    return CallCounter


@pytest.fixture
def numbers() -> list[int]:
    return [1, 2, 3, 4, 56, 7, 8, 9, 12]
