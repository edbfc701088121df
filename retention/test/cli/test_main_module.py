"""Tests for ``python -m retention``."""

from __future__ import annotations

import importlib
import runpy
import sys

import pytest


def _record_main_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    calls: list[str] = []
    monkeypatch.setattr("retention.cli.app.main", lambda: calls.append("main"))
    return calls


def test_import_does_not_run_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _record_main_calls(monkeypatch)
    monkeypatch.delitem(sys.modules, "retention.__main__", raising=False)

    importlib.import_module("retention.__main__")

    assert calls == []


def test_run_as_module_runs_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _record_main_calls(monkeypatch)
    monkeypatch.delitem(sys.modules, "retention.__main__", raising=False)

    runpy.run_module("retention", run_name="__main__")

    assert calls == ["main"]
