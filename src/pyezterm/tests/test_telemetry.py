# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezterm.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# 10/17/2026	Paul G. LeDuc				Add session_id stamping tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from pyezterm.core.telemetry import (
	LogSink,
	MemorySink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("playback.started", {"messages": 1})
	t.counter("keys.pressed", 3, {"key_code": 9})

	with t.timer("command.duration_ms"):
		pass

	assert t.enabled is False
	assert sink.events == []
	assert sink.metrics == []


def test_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("key.unhandled", {"key_code": 65})

	assert sink.event_names() == ["key.unhandled"]
	ev = sink.events[0]
	assert ev.attrs == {"key_code": 65}
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_counter_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("keys.pressed", 2, {"phase": "down"})

	m = sink.metrics[0]
	assert m.name == "keys.pressed"
	assert m.value == 2.0
	assert m.attrs["phase"] == "down"


def test_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("command.duration_ms", {"command": "echo"}):
		pass

	m = sink.metrics[0]
	assert m.name == "command.duration_ms"
	assert m.value >= 0.0
	assert m.attrs["command"] == "echo"


def test_bind_stamps_session_id_and_shares_sink():
	sink = MemorySink()
	base = Telemetry(enabled=True, sink=sink)

	a = base.bind("a")
	b = base.bind("b")
	a.event("command.submitted")
	b.counter("keys.pressed")
	base.event("unbound")

	assert sink.events[0].attrs == {"session_id": "a"}
	assert sink.metrics[0].attrs == {"session_id": "b"}
	assert sink.events[1].attrs == {}


def test_bind_does_not_overwrite_explicit_session_id():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink).bind("bound")

	t.event("x", {"session_id": "explicit"})

	assert sink.events[0].attrs["session_id"] == "explicit"


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("x")
	t.counter("y")
	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_logsink_writes_debug_records(caplog):
	logger = logging.getLogger("pyezterm.test.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="pyezterm.test.telemetry"):
		t.event("playback.finished")
		t.counter("keys.pressed", 1)

	messages = [r.getMessage() for r in caplog.records]
	assert any("playback.finished" in m for m in messages)
	assert any("keys.pressed" in m for m in messages)


def test_get_telemetry_safe_before_init():
	t = get_telemetry()

	t.event("should.not.raise")
	t.counter("should.not.raise", 1)

	assert isinstance(t, Telemetry)


def test_init_telemetry_disabled():
	t = init_telemetry({"telemetry_enabled": False})

	assert get_telemetry() is t
	assert t.enabled is False


def test_init_telemetry_log_sink_without_logger_falls_back():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)

	assert t.enabled is True
	t.event("enabled.nullsink")
	t.counter("enabled.nullsink", 1)

	# Leave the global disabled for the rest of the run.
	init_telemetry({"telemetry_enabled": False})
