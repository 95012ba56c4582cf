"""Alias config loader — read YAML or Python config files, resolve actions, register aliases.

A config document maps alias names to ``{action, options}`` entries::

    greet:
      action: myapp.actions:greet
      options:
        group: demo
        args: [name]

Entries whose action is missing or not invocable are skipped with a warning.
A partially broken file still registers its valid entries.
"""

from __future__ import annotations

import importlib
import logging
import runpy
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

try:
    import yaml
except ImportError as _exc:
    raise ImportError("The config loader requires pyyaml. Install it with: pip install pyyaml") from _exc

if TYPE_CHECKING:
    from aliascraft.registry import AliasRegistry

logger = logging.getLogger(__name__)

MAX_CONFIG_SIZE = 1_048_576  # 1 MB

# Global read from ``.py`` config files.
PYTHON_CONFIG_NAME = "CONFIG"

_RECOGNIZED_OPTIONS = ("group", "args")


def read_document(source: str | Path) -> Any:
    """Read a config file and return its raw value.

    ``.py`` files are executed and their ``CONFIG`` global is returned
    (``None`` when absent). Anything else is parsed as YAML, which also
    covers JSON.

    Raises:
        AliasNotFoundError: If the file does not exist.
        AliasFormatError: If the file is too large or cannot be parsed.
    """
    from aliascraft import AliasFormatError, AliasNotFoundError

    path = Path(source)
    if not path.is_file():
        raise AliasNotFoundError(f"Config file '{path}' not found.")

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE:
        raise AliasFormatError(f"Config file too large ({file_size} bytes, max {MAX_CONFIG_SIZE})")

    if path.suffix == ".py":
        namespace = runpy.run_path(str(path), run_name=f"aliascraft_config_{path.stem}")
        return namespace.get(PYTHON_CONFIG_NAME)

    try:
        return yaml.safe_load(path.read_bytes())
    except yaml.YAMLError as e:
        raise AliasFormatError(f"YAML parse error in '{path}': {e}") from e


def resolve_callable(reference: Any) -> Callable[..., Any] | None:
    """Turn an action reference into a callable, or ``None`` if that is not possible.

    Callables pass through. Strings may be ``"package.module:attr.path"`` or
    a dotted ``"package.module.attr"``.
    """
    if callable(reference):
        return reference
    if not isinstance(reference, str) or not reference.strip():
        return None

    module_name, sep, attr_path = reference.strip().partition(":")
    if not sep:
        module_name, _, attr_path = module_name.rpartition(".")
    if not module_name or not attr_path:
        return None

    try:
        target: Any = importlib.import_module(module_name)
        for part in attr_path.split("."):
            target = getattr(target, part)
    except Exception as e:
        logger.warning("Cannot resolve '%s': %s", reference, e)
        return None

    return target if callable(target) else None


def _coerce_options(name: str, options: Any) -> dict[str, Any]:
    """Keep only the recognised option keys, dropping malformed values."""
    if options is None:
        return {}
    if not isinstance(options, dict):
        logger.warning("Alias '%s': options must be a mapping, ignoring %r", name, options)
        return {}

    result: dict[str, Any] = {key: options[key] for key in _RECOGNIZED_OPTIONS if key in options}

    group = result.get("group")
    if group is not None and not isinstance(group, str):
        result["group"] = str(group)

    args = result.get("args")
    if isinstance(args, str):
        result["args"] = [args]
    elif isinstance(args, (list, tuple)):
        result["args"] = [str(a) for a in args]
    elif args is not None:
        logger.warning("Alias '%s': args must be a list of names, ignoring %r", name, args)
        del result["args"]

    return result


def iter_alias_entries(document: Any, source: str = "<config>") -> Iterator[tuple[str, Callable[..., Any], dict]]:
    """Yield ``(name, action, options)`` for each usable entry of an alias document.

    Raises:
        AliasFormatError: If the document is not a mapping.
    """
    from aliascraft import AliasFormatError

    if not isinstance(document, dict):
        raise AliasFormatError(f"Config '{source}' must be a mapping of alias names, got {type(document).__name__}")

    for name, definition in document.items():
        if not isinstance(definition, dict):
            logger.warning("Skipping alias '%s' in %s: definition is not a mapping", name, source)
            continue

        action = resolve_callable(definition.get("action"))
        if action is None:
            logger.warning("Skipping alias '%s' in %s: action is missing or not callable", name, source)
            continue

        yield str(name), action, _coerce_options(str(name), definition.get("options"))


def register_entries(registry: AliasRegistry, document: Any, source: str = "<config>") -> list[str]:
    """Register every usable entry of ``document`` and return the registered names."""
    registered: list[str] = []
    for name, action, options in iter_alias_entries(document, source):
        registry.register(name, action, **options)
        registered.append(name)
    return registered


def load_aliases(registry: AliasRegistry, source: str | Path) -> list[str]:
    """Load an alias config file into ``registry``.

    Args:
        registry: Registry receiving the aliases.
        source: Path to a YAML/JSON file or a ``.py`` file defining ``CONFIG``.

    Returns:
        Names registered from the file, in document order.

    Raises:
        AliasNotFoundError: If the file does not exist.
        AliasFormatError: If the file cannot be parsed or is not a mapping.
    """
    document = read_document(source)
    registered = register_entries(registry, document, str(source))
    logger.debug("Loaded %d alias(es) from %s", len(registered), source)
    return registered
