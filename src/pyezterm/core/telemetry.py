# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry for pyezterm sessions.
#
#   Emits:
#     - events   (key.unhandled, command.submitted, playback.*)
#     - counters (keys.pressed)
#     - timers   (command.duration_ms)
#
# Notes:
#   - Backends are "sinks"; the default sink is NullSink (no-op).
#   - Safe to call even when disabled.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add session_id to emitted records
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Sink that writes records to a logger at DEBUG.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade.

	session_id, when set, is stamped onto every record's attrs so several
	embedded terminals can share one sink.
	"""

	def __init__(
		self,
		enabled: bool,
		sink: TelemetrySink,
		*,
		session_id: Optional[str] = None,
	) -> None:
		self._enabled = enabled
		self._sink = sink
		self._session_id = session_id

	@property
	def enabled(self) -> bool:
		return self._enabled

	def bind(self, session_id: str) -> "Telemetry":
		"""
		Return a facade sharing this sink, stamped with session_id.
		"""
		return Telemetry(self._enabled, self._sink, session_id=session_id)

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(
			name=name,
			timestamp=time.time(),
			attrs=self._stamp(attrs),
		))

	def counter(
		self,
		name: str,
		value: int = 1,
		attrs: Optional[Dict[str, Any]] = None,
	) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(
			name=name,
			value=float(value),
			attrs=self._stamp(attrs),
		))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})

	def _stamp(self, attrs: Optional[Dict[str, Any]]) -> Dict[str, Any]:
		out = dict(attrs or {})
		if self._session_id is not None:
			out.setdefault("session_id", self._session_id)
		return out


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a counter.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=self._attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Dict[str, Any], logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize the global telemetry instance.

	Expected cfg keys:
		telemetry_enabled: bool
		telemetry_sink: "null" | "log"
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	sink: TelemetrySink
	if enabled and sink_name == "log" and logger is not None:
		sink = LogSink(logger)
	else:
		sink = NullSink()

	_telemetry = Telemetry(enabled=enabled, sink=sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
