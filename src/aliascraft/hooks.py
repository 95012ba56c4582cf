"""Hook interception — before/after alias execution."""

from __future__ import annotations

from typing import Any, Protocol


class PreHook(Protocol):
    """Runs before an alias. May rewrite ``args`` in place."""

    def __call__(self, alias_name: str, args: list[Any]) -> None: ...


class PostHook(Protocol):
    """Runs after an alias returned. Observation only."""

    def __call__(self, alias_name: str, args: tuple[Any, ...], result: Any) -> None: ...


def run_pre_hooks(hooks: tuple[PreHook, ...], alias_name: str, args: list[Any]) -> None:
    for hook in hooks:
        hook(alias_name, args)


def run_post_hooks(hooks: tuple[PostHook, ...], alias_name: str, args: tuple[Any, ...], result: Any) -> None:
    for hook in hooks:
        hook(alias_name, args, result)
