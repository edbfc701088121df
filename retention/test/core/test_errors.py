"""Tests for retention.core.errors module."""

from retention.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1
    assert ErrorCode.DATA_ERROR == 2
    assert ErrorCode.IO_ERROR == 5


def test_codes_are_plain_values() -> None:
    assert [code.name for code in ErrorCode] == ["OK", "USER_ERROR", "DATA_ERROR", "IO_ERROR"]
    assert str(ErrorCode.USER_ERROR) == "1"
