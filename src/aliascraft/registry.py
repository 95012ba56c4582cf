"""AliasRegistry — name-to-callable registry with before/after hooks."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from aliascraft.hooks import PostHook, PreHook, run_post_hooks, run_pre_hooks
from aliascraft.telemetry import AliasTelemetry
from aliascraft.types import AliasDefinition

logger = logging.getLogger(__name__)


class AliasRegistry:
    """Owns every alias definition and both hook lists.

    Callers hold an explicit instance instead of relying on process-wide state;
    ``clear()`` resets it for test isolation.

    Hooks run in registration order and are never removed. The same hook
    registered twice fires twice.
    """

    def __init__(self, *, telemetry: AliasTelemetry | None = None):
        self._aliases: dict[str, AliasDefinition] = {}
        self._pre_hooks: list[PreHook] = []
        self._post_hooks: list[PostHook] = []
        self._lock = threading.RLock()
        self.telemetry = telemetry or AliasTelemetry()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        action: Callable[..., Any],
        *,
        group: str | None = None,
        args: str | list[str] | tuple[str, ...] | None = None,
    ) -> AliasDefinition:
        """Register ``action`` under ``name``, silently replacing any previous alias.

        Args:
            name: The alias name.
            action: Callable invoked by :meth:`run` with positional arguments.
            group: Optional classification tag used by :meth:`get_aliases_by_group`.
            args: Expected argument names. The count is the minimum number of
                positional arguments a run must supply; empty means unchecked.
                A single string is one argument name.

        Raises:
            TypeError: If ``action`` is not callable.
        """
        if not callable(action):
            raise TypeError(f"Alias '{name}' action must be callable, got {type(action).__name__}")

        if isinstance(args, str):
            args = [args]
        definition = AliasDefinition(name=name, action=action, group=group, args=list(args or []))
        with self._lock:
            replaced = name in self._aliases
            self._aliases[name] = definition
        logger.debug("Registered alias '%s'%s", name, " (replaced)" if replaced else "")
        return definition

    def alias(
        self,
        name: str,
        *,
        group: str | None = None,
        args: str | list[str] | tuple[str, ...] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of :meth:`register`. Returns the function unchanged."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(name, func, group=group, args=args)
            return func

        return decorator

    def register_pre_hook(self, hook: PreHook) -> PreHook:
        """Append a hook called as ``hook(alias_name, args)`` before every run.

        ``args`` is the live argument list; in-place changes are seen by later
        hooks, the arity check and the action.
        """
        if not callable(hook):
            raise TypeError(f"Pre-hook must be callable, got {type(hook).__name__}")
        with self._lock:
            self._pre_hooks.append(hook)
        return hook

    def register_post_hook(self, hook: PostHook) -> PostHook:
        """Append a hook called as ``hook(alias_name, args, result)`` after every run."""
        if not callable(hook):
            raise TypeError(f"Post-hook must be callable, got {type(hook).__name__}")
        with self._lock:
            self._post_hooks.append(hook)
        return hook

    def change_group(self, name: str, group: str | None) -> None:
        """Move an existing alias to ``group``. Action and args are left untouched."""
        from aliascraft import AliasNotFoundError

        with self._lock:
            definition = self._aliases.get(name)
            if definition is None:
                raise AliasNotFoundError(f"Alias '{name}' not defined.", name=name)
            previous = definition.group
            definition.group = group
        logger.debug("Alias '%s' moved from group %r to %r", name, previous, group)

    def load_from_config_file(self, path: str | Path) -> list[str]:
        """Register every valid entry of an alias config file. See :func:`loader.load_aliases`."""
        from aliascraft.loader import load_aliases

        return load_aliases(self, path)

    def clear(self) -> None:
        """Drop all aliases and hooks."""
        with self._lock:
            self._aliases.clear()
            self._pre_hooks.clear()
            self._post_hooks.clear()

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def run(self, name: str, *args: Any) -> Any:
        """Run the alias ``name`` with positional ``args``.

        Pre-hooks run first and may rewrite the arguments. The minimum argument
        count is checked afterwards, so a pre-hook can supply missing values.
        Anything raised by the action or a hook propagates unchanged.

        Raises:
            AliasNotFoundError: If ``name`` is not registered.
            AliasArityError: If fewer arguments remain than the alias expects.
        """
        from aliascraft import AliasArityError, AliasNotFoundError

        with self._lock:
            definition = self._aliases.get(name)
            pre_hooks = tuple(self._pre_hooks)
            post_hooks = tuple(self._post_hooks)
        if definition is None:
            raise AliasNotFoundError(f"Alias '{name}' not defined.", name=name)

        call_args = list(args)
        run_pre_hooks(pre_hooks, name, call_args)

        if definition.args and len(call_args) < definition.min_args:
            raise AliasArityError(
                f"Alias '{name}' expects at least {definition.min_args} arguments.",
                name=name,
                expected=definition.min_args,
            )

        logger.debug("Running alias '%s' with %d argument(s)", name, len(call_args))
        with self.telemetry.alias_span(definition, len(call_args)):
            result = definition.action(*call_args)

        run_post_hooks(post_hooks, name, tuple(call_args), result)
        return result

    def chain(self, *names: str) -> Callable[..., Any]:
        """Build a callable that runs each alias in ``names`` with the same arguments.

        The chained callable returns the last alias's result, or ``None`` when
        ``names`` is empty. Names are looked up when the chain is called.
        """

        def chained(*args: Any) -> Any:
            result = None
            for name in names:
                result = self.run(name, *args)
            return result

        chained.__name__ = "chain(" + ", ".join(names) + ")"
        return chained

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, name: str) -> AliasDefinition | None:
        with self._lock:
            return self._aliases.get(name)

    def aliases(self) -> dict[str, AliasDefinition]:
        """All definitions in registration order."""
        with self._lock:
            return dict(self._aliases)

    def get_aliases_by_group(self, group: str) -> dict[str, AliasDefinition]:
        """Definitions whose group equals ``group`` exactly. Ungrouped aliases never match."""
        with self._lock:
            return {name: d for name, d in self._aliases.items() if d.group is not None and d.group == group}

    def groups(self) -> list[str]:
        """Distinct group names in first-seen order."""
        with self._lock:
            return list(dict.fromkeys(d.group for d in self._aliases.values() if d.group is not None))

    @property
    def pre_hooks(self) -> tuple[PreHook, ...]:
        with self._lock:
            return tuple(self._pre_hooks)

    @property
    def post_hooks(self) -> tuple[PostHook, ...]:
        with self._lock:
            return tuple(self._post_hooks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._aliases

    def __len__(self) -> int:
        with self._lock:
            return len(self._aliases)

    def __iter__(self) -> Iterator[str]:
        return iter(self.aliases())
