"""Shared test fixtures."""

from __future__ import annotations

import importlib
import sys
import textwrap

import pytest

from aliascraft import AliasRegistry

SAMPLE_HOOKS = """\
CALLS = []


def upper_args(alias_name, args):
    CALLS.append(("pre", alias_name))
    args[:] = [a.upper() for a in args]


def record(alias_name, args, result):
    CALLS.append(("post", alias_name, result))


def greet(name):
    return f"Hello, {name}!"


NOT_CALLABLE = 42
"""


@pytest.fixture
def registry():
    return AliasRegistry()


@pytest.fixture
def write_config(tmp_path):
    """Write a config file under tmp_path and return its path."""

    def _write(content: str, name: str = "aliases.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def hooks_module(tmp_path, monkeypatch):
    """Importable module ``sample_hooks`` with hooks that record their calls."""
    (tmp_path / "sample_hooks.py").write_text(SAMPLE_HOOKS)
    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop("sample_hooks", None)

    yield importlib.import_module("sample_hooks")

    sys.modules.pop("sample_hooks", None)
