"""OpenTelemetry integration — graceful no-op if absent."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

try:
    from opentelemetry import metrics, trace

    _HAS_OTEL = True
except ImportError:
    _HAS_OTEL = False


def has_otel() -> bool:
    """Check if OpenTelemetry is available."""
    return _HAS_OTEL


class _NoOpSpan:
    """Dummy span when OTel is not available."""

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def set_attribute(self, key, value):
        pass

    def set_status(self, status, description=None):
        pass

    def record_exception(self, exception, attributes=None):
        pass

    def add_event(self, name, attributes=None):
        pass

    def end(self):
        pass


class AliasTelemetry:
    """OTel spans and counters for alias runs. No-op if opentelemetry not installed.

    Install: pip install aliascraft[otel]
    """

    def __init__(self):
        if _HAS_OTEL:
            self._tracer = trace.get_tracer("aliascraft")
            self._meter = metrics.get_meter("aliascraft")
            self._run_counter = self._meter.create_counter(
                "aliascraft.alias.runs",
                description="Number of alias runs started",
            )
        else:
            self._tracer = None
            self._meter = None
            self._run_counter = None

    @contextlib.contextmanager
    def alias_span(self, definition: Any, arg_count: int) -> Iterator[Any]:
        """Wrap one alias run. Exceptions raised inside propagate unchanged."""
        if not self._tracer:
            yield _NoOpSpan()
            return

        attributes = {
            "alias.name": definition.name,
            "alias.group": definition.group or "",
            "alias.arg_count": arg_count,
        }
        self._run_counter.add(1, {"alias.name": definition.name})
        with self._tracer.start_as_current_span(f"alias.run {definition.name}", attributes=attributes) as span:
            yield span
