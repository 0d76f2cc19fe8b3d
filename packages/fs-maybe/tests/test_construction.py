"""Tests for just, nothing and from_nullable."""

import dataclasses

import pytest

from fs_maybe.maybe import Just, MaybeObject, Nothing, from_nullable, just, nothing


class TestJust:
    def test_wraps_value(self):
        result = just(5)
        assert isinstance(result, Just)
        assert result.value == 5

    def test_wraps_none_verbatim(self):
        result = just(None)
        assert isinstance(result, Just)
        assert result.value is None

    def test_is_immutable(self):
        result = just(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 6  # type: ignore[misc]

    def test_equality(self):
        assert just(5) == just(5)
        assert just(5) != just(6)
        assert just(5) != nothing()


class TestNothing:
    def test_constructs_nothing(self):
        assert isinstance(nothing(), Nothing)

    def test_instances_are_equal(self):
        assert nothing() == nothing()


class TestFromNullable:
    def test_none_is_nothing(self):
        assert from_nullable(None) == nothing()

    def test_value_is_just(self):
        result = from_nullable(5)
        assert isinstance(result, Just)
        assert result.value == 5

    @pytest.mark.parametrize('value', [0, '', False, [], 0.0])
    def test_falsy_value_is_just(self, value):
        assert from_nullable(value) == just(value)


class TestExplicitTypeParameter:
    def test_just_with_type_parameter(self):
        assert Just[int](5) == just(5)

    def test_nothing_with_type_parameter(self):
        assert Nothing[int]() == nothing()

    def test_type_parameter_does_not_change_variant(self):
        assert isinstance(Nothing[str](), Nothing)
        assert isinstance(Just[str]('a'), Just)


class TestAliases:
    def test_object_alias_accepts_both_variants(self):
        values: list[MaybeObject] = [just(object()), nothing()]
        assert [isinstance(v, (Just, Nothing)) for v in values] == [True, True]
