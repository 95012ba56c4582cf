"""Tests for the alias config loader."""

from __future__ import annotations

import logging
import os.path

import pytest

from aliascraft import AliasFormatError, AliasNotFoundError
from aliascraft import loader
from aliascraft.loader import iter_alias_entries, load_aliases, read_document, resolve_callable

VALID_CONFIG = """\
join:
  action: os.path:join
  options:
    group: paths
    args: [first, second]

length:
  action: builtins.len
  options:
    args: value

upper:
  action: builtins:str.upper
"""

PARTIAL_CONFIG = """\
good:
  action: builtins:len

not-callable:
  action: 42

missing-action:
  options:
    group: demo

unresolvable:
  action: no_such_module_xyz:thing

not-a-mapping: just a string

also-good:
  action: os.path:basename
  options:
    group: paths
"""


class TestLoadFromConfigFile:
    def test_registers_valid_config(self, registry, write_config):
        path = write_config(VALID_CONFIG)

        names = registry.load_from_config_file(path)

        assert names == ["join", "length", "upper"]
        assert registry.run("join", "a", "b") == os.path.join("a", "b")
        assert registry.run("length", "abc") == 3
        assert registry.run("upper", "abc") == "ABC"

    def test_options_applied(self, registry, write_config):
        registry.load_from_config_file(write_config(VALID_CONFIG))

        join = registry.get("join")
        assert join.group == "paths"
        assert join.args == ["first", "second"]
        assert join.action is os.path.join
        assert registry.get("length").args == ["value"]
        assert registry.get("upper").group is None

    def test_missing_file(self, registry, tmp_path):
        with pytest.raises(AliasNotFoundError, match="not found"):
            registry.load_from_config_file(tmp_path / "nope.yaml")

    def test_directory_is_not_a_config_file(self, registry, tmp_path):
        with pytest.raises(AliasNotFoundError):
            registry.load_from_config_file(tmp_path)

    @pytest.mark.parametrize(
        "content",
        ["- a\n- b\n", "just a string\n", "42\n", ""],
        ids=["list", "string", "number", "empty"],
    )
    def test_non_mapping_document(self, registry, write_config, content):
        with pytest.raises(AliasFormatError, match="must be a mapping"):
            registry.load_from_config_file(write_config(content))

    def test_yaml_syntax_error(self, registry, write_config):
        path = write_config("greet: {action: builtins:len\n")
        with pytest.raises(AliasFormatError, match="YAML parse error"):
            registry.load_from_config_file(path)

    def test_invalid_entries_skipped_valid_ones_registered(self, registry, write_config, caplog):
        path = write_config(PARTIAL_CONFIG)

        with caplog.at_level(logging.WARNING, logger="aliascraft.loader"):
            names = registry.load_from_config_file(path)

        assert names == ["good", "also-good"]
        assert list(registry.aliases()) == ["good", "also-good"]
        assert registry.run("also-good", "/tmp/x.txt") == "x.txt"
        assert "not-callable" in caplog.text
        assert "missing-action" in caplog.text
        assert "not-a-mapping" in caplog.text

    def test_broken_action_modules_skipped(self, registry, write_config, tmp_path, monkeypatch, caplog):
        (tmp_path / "broken_syntax_actions.py").write_text("def f(:\n    pass\n")
        (tmp_path / "failing_import_actions.py").write_text("raise RuntimeError('import-time failure')\n")
        monkeypatch.syspath_prepend(str(tmp_path))
        path = write_config(
            """\
            good:
              action: builtins:len
            syntax:
              action: broken_syntax_actions:f
            raises:
              action: failing_import_actions:f
            also-good:
              action: os.path:basename
            """
        )

        with caplog.at_level(logging.WARNING, logger="aliascraft.loader"):
            names = registry.load_from_config_file(path)

        assert names == ["good", "also-good"]
        assert "syntax" not in registry
        assert "raises" not in registry
        assert "import-time failure" in caplog.text

    def test_json_config(self, registry, write_config):
        path = write_config('{"size": {"action": "builtins:len", "options": {"args": ["x"]}}}', "aliases.json")
        registry.load_from_config_file(path)
        assert registry.run("size", [1, 2]) == 2

    def test_python_config(self, registry, write_config):
        path = write_config(
            """\
            def greet(name):
                return f"Hello, {name}!"

            CONFIG = {
                "greet": {"action": greet, "options": {"group": "demo", "args": ["name"]}},
                "broken": {"action": "not importable at all"},
            }
            """,
            "aliases.py",
        )

        assert registry.load_from_config_file(path) == ["greet"]
        assert registry.run("greet", "Alice") == "Hello, Alice!"
        assert registry.get("greet").group == "demo"

    def test_python_config_without_config_global(self, registry, write_config):
        path = write_config("ALIASES = {}\n", "aliases.py")
        with pytest.raises(AliasFormatError):
            registry.load_from_config_file(path)

    def test_file_too_large(self, registry, write_config, monkeypatch):
        monkeypatch.setattr(loader, "MAX_CONFIG_SIZE", 10)
        with pytest.raises(AliasFormatError, match="too large"):
            registry.load_from_config_file(write_config(VALID_CONFIG))

    def test_reload_overwrites(self, registry, write_config):
        registry.register("good", lambda: "old")
        registry.load_from_config_file(write_config(PARTIAL_CONFIG))
        assert registry.run("good", "four") == 4

    def test_load_aliases_function(self, registry, write_config):
        assert load_aliases(registry, str(write_config(VALID_CONFIG))) == ["join", "length", "upper"]


class TestIterAliasEntries:
    def test_callables_pass_through(self):
        entries = list(iter_alias_entries({"x": {"action": len}}))
        assert entries == [("x", len, {})]

    def test_unknown_options_dropped(self):
        [(_, _, options)] = iter_alias_entries({"x": {"action": len, "options": {"group": "g", "color": "red"}}})
        assert options == {"group": "g"}

    def test_malformed_options_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="aliascraft.loader"):
            [(_, _, options)] = iter_alias_entries({"x": {"action": len, "options": ["group"]}})
        assert options == {}
        assert "options must be a mapping" in caplog.text

    def test_malformed_args_ignored(self):
        [(_, _, options)] = iter_alias_entries({"x": {"action": len, "options": {"group": "g", "args": 3}}})
        assert options == {"group": "g"}

    def test_non_string_values_coerced(self):
        [(name, _, options)] = iter_alias_entries({1: {"action": len, "options": {"group": 7, "args": [1, 2]}}})
        assert name == "1"
        assert options == {"group": "7", "args": ["1", "2"]}

    def test_non_mapping_document(self):
        with pytest.raises(AliasFormatError, match="list"):
            list(iter_alias_entries(["x"], "inline"))


class TestResolveCallable:
    def test_colon_form(self):
        assert resolve_callable("os.path:join") is os.path.join

    def test_dotted_form(self):
        assert resolve_callable("os.path.join") is os.path.join

    def test_nested_attribute(self):
        assert resolve_callable("builtins:str.upper") is str.upper

    def test_callable_passthrough(self):
        assert resolve_callable(len) is len

    @pytest.mark.parametrize(
        "reference",
        [None, 42, "", "   ", "len", "os.path:", ":join", "os.path:nope", "no_such_module_xyz:f", "os:sep"],
    )
    def test_unresolvable(self, reference):
        assert resolve_callable(reference) is None


class TestReadDocument:
    def test_returns_parsed_yaml(self, write_config):
        assert read_document(write_config("a: 1\n")) == {"a": 1}

    def test_missing(self, tmp_path):
        with pytest.raises(AliasNotFoundError):
            read_document(tmp_path / "missing.yaml")
