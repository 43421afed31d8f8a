# ---------------------------------------------------------------------------
# File: test_history.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for HistoryNavigator.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezterm.app.history import HistoryNavigator


def test_empty_navigator_has_nothing():
	nav = HistoryNavigator()

	assert nav.has_prev() is False
	assert nav.has_next() is False
	assert nav.get_prev() is None
	assert nav.get_next() is None


def test_prev_walks_backwards_without_wraparound():
	nav = HistoryNavigator()
	nav.record("a")
	nav.record("b")

	assert nav.get_prev() == "b"
	assert nav.get_prev() == "a"
	assert nav.has_prev() is False
	assert nav.get_prev() is None
	assert nav.cursor == 0


def test_next_walks_forward_and_stops_at_newest():
	nav = HistoryNavigator()
	for cmd in ("a", "b", "c"):
		nav.record(cmd)

	nav.get_prev()
	nav.get_prev()
	nav.get_prev()

	assert nav.get_next() == "b"
	assert nav.get_next() == "c"
	assert nav.has_next() is False
	assert nav.get_next() is None


def test_record_resets_cursor_so_up_returns_latest():
	nav = HistoryNavigator()
	nav.record("first")
	nav.get_prev()

	nav.record("second")

	assert nav.get_prev() == "second"


def test_record_keeps_duplicates():
	nav = HistoryNavigator()
	nav.record("ls")
	nav.record("ls")

	assert nav.entries == ("ls", "ls")
	assert len(nav) == 2


def test_reset_parks_cursor_past_newest():
	nav = HistoryNavigator()
	nav.record("a")
	nav.record("b")
	nav.get_prev()
	nav.get_prev()

	nav.reset()

	assert nav.cursor == 2
	assert nav.get_prev() == "b"


def test_seeded_entries_start_past_newest():
	nav = HistoryNavigator(["x", "y"])

	assert nav.cursor == 2
	assert nav.get_prev() == "y"
