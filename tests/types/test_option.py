"""Tests for Option, Some, Nothing and from_nullable."""

import pytest

from fnkit.errors import FnkitError, UnwrappedNoneError
from fnkit.types.option import Nothing, Option, Some, from_nullable


class TestConstruction:
    @pytest.mark.parametrize("value", [1, "a", [1, 2], {"k": "v"}, 0, "", False, None])
    def test_some_is_some(self, value: object) -> None:
        opt = Some(value)
        assert opt.is_some() is True
        assert opt.is_none() is False

    def test_nothing_is_none(self) -> None:
        opt = Nothing()
        assert opt.is_none() is True
        assert opt.is_some() is False

    def test_classmethod_aliases(self) -> None:
        assert Option.some(3) == Some(3)
        assert Option.nothing() == Nothing()

    def test_structural_equality(self) -> None:
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Some(None) != Nothing()
        assert Nothing() == Nothing()

    def test_repr(self) -> None:
        assert repr(Some(1)) == "Some(1)"
        assert repr(Some("x")) == "Some('x')"
        assert repr(Nothing()) == "Nothing()"

    def test_frozen(self) -> None:
        opt = Some(1)
        with pytest.raises(Exception):
            opt.value = 2  # type: ignore[misc]


class TestFromNullable:
    def test_none_becomes_nothing(self) -> None:
        assert from_nullable(None) == Nothing()

    @pytest.mark.parametrize("value", [0, "", False, [], "text", 42])
    def test_other_values_become_some(self, value: object) -> None:
        assert Option.from_nullable(value) == Some(value)

    def test_round_trip_through_unchecked(self) -> None:
        none = Nothing()
        assert Option.from_nullable(none.unwrap_unchecked()) == none


class TestUnwrap:
    def test_unwrap_some(self) -> None:
        assert Some(1).unwrap() == 1

    def test_unwrap_keeps_identity(self) -> None:
        payload = {"a": [1, 2]}
        assert Some(payload).unwrap() is payload

    def test_unwrap_nothing_raises(self) -> None:
        with pytest.raises(UnwrappedNoneError, match="Unwrapped None"):
            Nothing().unwrap()

    def test_unwrapped_none_is_fnkit_error(self) -> None:
        with pytest.raises(FnkitError):
            Nothing().unwrap()

    def test_unwrap_unchecked_nothing(self) -> None:
        assert Nothing().unwrap_unchecked() is None

    def test_unwrap_some_none(self) -> None:
        assert Some(None).unwrap() is None


class TestUnwrapOr:
    def test_nothing_uses_default(self) -> None:
        assert Nothing().unwrap_or(2) == 2

    def test_some_ignores_default(self) -> None:
        assert Some(1).unwrap_or(2) == 1

    @pytest.mark.parametrize("falsy", [0, "", False])
    def test_falsy_value_is_present(self, falsy: object) -> None:
        assert Some(falsy).unwrap_or("default") == falsy

    def test_or_else_not_called_when_present(self) -> None:
        calls: list[int] = []

        def fallback() -> int:
            calls.append(1)
            return 9

        assert Some(0).unwrap_or_else(fallback) == 0
        assert calls == []

    def test_or_else_called_when_empty(self) -> None:
        assert Nothing().unwrap_or_else(lambda: 9) == 9


class TestMap:
    def test_map_some(self) -> None:
        some = Some(1).map(lambda x: x * 2)
        assert some.map(lambda x: x + 1).unwrap() == 3

    def test_map_returns_new_instance(self) -> None:
        original = Some(1)
        mapped = original.map(lambda x: x + 1)
        assert original.unwrap() == 1
        assert mapped is not original

    def test_map_nothing(self) -> None:
        called: list[int] = []
        result = Nothing().map(lambda x: called.append(x))
        assert result == Nothing()
        assert called == []

    def test_map_falsy_value(self) -> None:
        assert Some(0).map(lambda x: x + 1) == Some(1)

    def test_flat_map(self) -> None:
        def half(x: int) -> Option[int]:
            return Some(x // 2) if x % 2 == 0 else Nothing()

        assert Some(4).flat_map(half) == Some(2)
        assert Some(3).flat_map(half) == Nothing()
        assert Nothing().flat_map(half) == Nothing()

    def test_flat_map_single_level(self) -> None:
        nested = Some(1).flat_map(lambda x: Some(Some(x)))
        assert nested.unwrap() == Some(1)
