# ---------------------------------------------------------------------------
# File: test_engine.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ShellEngine (the bundled Command Engine).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# 10/17/2026	Paul G. LeDuc				Blank line resets the history cursor
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezterm.app.commands import CommandEngine, CommandError
from pyezterm.app.engine import ShellEngine
from pyezterm.app.state import HistoryEntry, initial_state


def test_engine_satisfies_protocol():
	assert isinstance(ShellEngine(), CommandEngine)


def test_execute_echoes_command_line_with_cwd():
	engine = ShellEngine()
	state = initial_state()

	state = engine.execute("echo hi", state)

	assert state.history == (HistoryEntry("echo hi", cwd=""), HistoryEntry("hi"))


def test_unknown_command_reports_not_found():
	state = ShellEngine().execute("frobnicate now", initial_state())

	assert state.history[-1] == HistoryEntry("frobnicate: command not found")


def test_blank_line_is_echoed_but_not_recorded():
	engine = ShellEngine()

	state = engine.execute("   ", initial_state())

	assert state.history == (HistoryEntry("   ", cwd=""),)
	assert engine.has_prev_command() is False


def test_identical_commands_are_not_deduplicated():
	engine = ShellEngine()
	state = initial_state()

	state = engine.execute("echo same", state)
	state = engine.execute("echo same", state)

	commands = [e for e in state.history if e.cwd is not None]
	assert len(commands) == 2
	assert engine.history.entries == ("echo same", "echo same")


def test_command_error_becomes_output_line():
	def fail(state, args):
		raise CommandError("missing operand")

	state = ShellEngine({"cat": fail}).execute("cat", initial_state())

	assert state.history[-1] == HistoryEntry("cat: missing operand")


def test_other_handler_errors_propagate():
	def boom(state, args):
		raise RuntimeError("bug")

	with pytest.raises(RuntimeError):
		ShellEngine({"boom": boom}).execute("boom", initial_state())


def test_clear_wipes_history_including_its_own_line():
	engine = ShellEngine()
	state = engine.execute("echo a", initial_state())

	state = engine.execute("clear", state)

	assert state.history == ()


def test_history_navigation_delegates_to_navigator():
	engine = ShellEngine()
	state = initial_state()
	state = engine.execute("echo 1", state)
	state = engine.execute("echo 2", state)

	assert engine.has_prev_command() is True
	assert engine.get_prev_command() == "echo 2"
	assert engine.get_prev_command() == "echo 1"
	assert engine.has_next_command() is True
	assert engine.get_next_command() == "echo 2"
	assert engine.has_next_command() is False


@pytest.mark.parametrize(
	"buffer, expected",
	[
		("ec", "echo "),
		("who", "whoami "),
		("  pw", "pwd "),
		("", None),
		("zzz", None),
		("echo h", None),
	],
)
def test_autocomplete_first_word(buffer, expected):
	assert ShellEngine().autocomplete(buffer, initial_state()) == expected


def test_autocomplete_ambiguous_prefix_returns_none():
	engine = ShellEngine({"echo2": lambda state, args: state})

	assert engine.autocomplete("ech", initial_state()) is None


def test_blank_line_moves_cursor_back_to_newest():
	engine = ShellEngine()
	state = engine.execute("echo a", initial_state())
	state = engine.execute("echo b", state)
	assert engine.get_prev_command() == "echo b"
	assert engine.get_prev_command() == "echo a"

	engine.execute("", state)

	assert engine.history.entries == ("echo a", "echo b")
	assert engine.get_prev_command() == "echo b"
