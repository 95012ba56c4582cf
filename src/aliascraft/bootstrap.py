"""Application bootstrap — build a registry from a settings file.

The settings document carries an ``aliases`` section (same shape as an alias
config file) and an optional ``hooks`` section::

    aliases:
      greet:
        action: myapp.actions:greet
    hooks:
      pre: [myapp.hooks:normalize]
      post: [myapp.hooks:audit]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aliascraft.loader import read_document, register_entries, resolve_callable
from aliascraft.registry import AliasRegistry

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "ALIASCRAFT_CONFIG"


def _hook_references(hooks: Any, phase: str) -> list[Any]:
    refs = hooks.get(phase) if isinstance(hooks, dict) else None
    if refs is None:
        return []
    if not isinstance(refs, (list, tuple)):
        refs = [refs]
    return list(refs)


def _register_hooks(registry: AliasRegistry, hooks: Any, source: str) -> None:
    if hooks is None:
        return
    if not isinstance(hooks, dict):
        logger.warning("Ignoring hooks section in %s: expected a mapping with 'pre'/'post' lists", source)
        return

    for phase, register in (("pre", registry.register_pre_hook), ("post", registry.register_post_hook)):
        for ref in _hook_references(hooks, phase):
            hook = resolve_callable(ref)
            if hook is None:
                logger.warning("Skipping %s-hook %r in %s: not callable", phase, ref, source)
                continue
            register(hook)


def boot(registry: AliasRegistry, settings_path: str | Path | None = None) -> AliasRegistry:
    """Register the aliases and hooks declared in a settings file.

    A missing settings file is not an error: the registry is returned as is.

    Raises:
        AliasFormatError: If the settings document is not a mapping.
    """
    from aliascraft import AliasFormatError

    if settings_path is None:
        return registry

    path = Path(settings_path)
    if not path.is_file():
        logger.debug("Settings file %s not found, nothing to boot", path)
        return registry

    settings = read_document(path)
    if not isinstance(settings, dict):
        raise AliasFormatError(f"Settings '{path}' must be a mapping, got {type(settings).__name__}")

    aliases = settings.get("aliases")
    if isinstance(aliases, dict):
        register_entries(registry, aliases, str(path))
    elif aliases is not None:
        logger.warning("Ignoring aliases section in %s: expected a mapping", path)

    _register_hooks(registry, settings.get("hooks"), str(path))

    logger.debug(
        "Booted %d alias(es), %d pre-hook(s), %d post-hook(s) from %s",
        len(registry),
        len(registry.pre_hooks),
        len(registry.post_hooks),
        path,
    )
    return registry


def build_registry(settings_path: str | Path | None = None) -> AliasRegistry:
    """Create a fresh registry and boot it from ``settings_path``."""
    return boot(AliasRegistry(), settings_path)
