"""Tests for retention.core.result module."""

import pytest

from retention.core.result import Err, Ok, Result


class TestOk:
    def test_value(self) -> None:
        assert Ok(42).value == 42

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok(42)) == "Ok(42)"


class TestErr:
    def test_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("oops")) == "Err('oops')"

    def test_equality(self) -> None:
        assert Err("a") == Err("a")
        assert Err(42) != Ok(42)


def test_match() -> None:
    result: Result[int, str] = Err("nope")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "nope"


def test_carriers_hold_data_only() -> None:
    assert Ok.__slots__ == ("value",)
    assert Err.__slots__ == ("error",)
    assert not hasattr(Ok(1), "map")
    assert not hasattr(Ok(1), "unwrap")
