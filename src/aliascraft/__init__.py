"""AliasCraft — named, hookable callables for applications."""

from __future__ import annotations

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("aliascraft")
except Exception:  # pragma: no cover — editable installs, test envs
    __version__ = "0.0.0-dev"

from aliascraft.bootstrap import SETTINGS_ENV_VAR, boot, build_registry
from aliascraft.hooks import PostHook, PreHook
from aliascraft.registry import AliasRegistry
from aliascraft.telemetry import AliasTelemetry, has_otel
from aliascraft.types import AliasDefinition

__all__ = [
    "__version__",
    "AliasRegistry",
    "AliasDefinition",
    "AliasTelemetry",
    "AliasError",
    "AliasNotFoundError",
    "AliasArityError",
    "AliasFormatError",
    "PreHook",
    "PostHook",
    "SETTINGS_ENV_VAR",
    "boot",
    "build_registry",
    "has_otel",
]


class AliasError(Exception):
    """Base class for errors raised by the registry itself."""

    pass


class AliasNotFoundError(AliasError, LookupError):
    """Raised when an alias name is not registered or a config file does not exist."""

    def __init__(self, message, name=None):
        self.name = name
        super().__init__(message)


class AliasArityError(AliasError, ValueError):
    """Raised when a run supplies fewer positional arguments than the alias expects."""

    def __init__(self, message, name=None, expected=None):
        self.name = name
        self.expected = expected
        super().__init__(message)


class AliasFormatError(AliasError, ValueError):
    """Raised for config load-time errors (unparsable file, document is not a mapping, etc.)."""

    pass
