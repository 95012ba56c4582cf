"""Shared types for AliasCraft internals."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class AliasDefinition:
    """A registered alias.

    ``args`` lists expected argument names. Only its length matters: it is the
    minimum number of positional arguments ``run()`` must end up with.
    """

    name: str
    action: Callable[..., Any]
    group: str | None = None
    args: list[str] = field(default_factory=list)

    @property
    def min_args(self) -> int:
        return len(self.args)

    @property
    def action_name(self) -> str:
        module = getattr(self.action, "__module__", None)
        qualname = getattr(self.action, "__qualname__", None) or type(self.action).__name__
        return f"{module}:{qualname}" if module else qualname
