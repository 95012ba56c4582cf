"""Sample actions and hooks for the demo settings file."""

from __future__ import annotations

import logging

logger = logging.getLogger("aliascraft.examples")


def greet(name: str) -> str:
    return f"Hello, {name}!"


def add(*numbers: str) -> float:
    return sum(float(n) for n in numbers)


def shout(text: str, *rest: str) -> str:
    return " ".join((text, *rest)).upper() + "!"


# ── Hooks ────────────────────────────────────────────────────────────


def strip_args(alias_name: str, args: list) -> None:
    """Trim whitespace from string arguments in place."""
    args[:] = [a.strip() if isinstance(a, str) else a for a in args]


def log_result(alias_name: str, args: tuple, result: object) -> None:
    logger.info("%s%r -> %r", alias_name, args, result)
