"""Tests for match and unbox."""

import pytest

from fs_maybe.maybe import just, match, nothing, unbox


@pytest.mark.parametrize('unwrap', [match, unbox])
class TestMatch:
    def test_just_can_be_unwrapped(self, unwrap):
        assert unwrap(just(5), lambda v: v, lambda: 0) == 5

    def test_nothing_can_be_unwrapped(self, unwrap):
        assert unwrap(nothing(), lambda v: v, lambda: 0) == 0

    def test_nothing_can_return_a_different_type(self, unwrap):
        result = unwrap(nothing(), lambda v: v, lambda: 'No value returned')
        assert result == 'No value returned'

    def test_just_calls_only_on_just(self, unwrap, counter):
        on_just = counter(lambda v: v + 1)
        on_nothing = counter(lambda: 0)
        assert unwrap(just(5), on_just, on_nothing) == 6
        assert on_just.calls == [(5,)]
        assert on_nothing.count == 0

    def test_nothing_calls_only_on_nothing(self, unwrap, counter):
        on_just = counter(lambda v: v + 1)
        on_nothing = counter(lambda: 0)
        assert unwrap(nothing(), on_just, on_nothing) == 0
        assert on_just.count == 0
        assert on_nothing.count == 1

    def test_falsy_value_goes_to_on_just(self, unwrap):
        assert unwrap(just(0), lambda v: ('just', v), lambda: ('nothing',)) == ('just', 0)
