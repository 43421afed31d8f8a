# ---------------------------------------------------------------------------
# File: test_terminal_view.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for TerminalView helpers and Tk wiring.
#
# Notes:
#	- Widget tests use the tk_root fixture (skipped without a display).
#	- Events are delivered by calling the handlers with a stand-in event
#	  object; event_generate needs a mapped, focused window.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

from pyezterm.app.config import TerminalConfig, Theme
from pyezterm.app.keys import KeyCode
from pyezterm.app.playback import PlaybackMessage
from pyezterm.app.session import TerminalSession
from pyezterm.app.state import HistoryEntry
from pyezterm.ui.terminal_view import (
	PALETTES,
	TerminalView,
	WindowHeader,
	format_history_line,
	format_prompt,
	keysym_to_code,
)


def _event(keysym: str) -> SimpleNamespace:
	return SimpleNamespace(keysym=keysym)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
	"keysym, code",
	[
		("Control_L", KeyCode.CTRL),
		("Control_R", KeyCode.CTRL),
		("Tab", KeyCode.TAB),
		("Up", KeyCode.UP),
		("Down", KeyCode.DOWN),
		("l", KeyCode.L),
		("C", KeyCode.C),
		("a", 65),
		("7", 55),
		("Return", 0),
		("space", 0),
	],
)
def test_keysym_to_code(keysym, code):
	assert keysym_to_code(keysym) == int(code)


def test_format_prompt():
	assert format_prompt("hacker@default", "") == "hacker@default ~ $"
	assert format_prompt("me@box", "home") == "me@box ~home $"


def test_format_history_line():
	assert format_history_line(HistoryEntry("ls", cwd="tmp"), "me@box") == "me@box ~tmp $ ls"
	assert format_history_line(HistoryEntry("output"), "me@box") == "output"


def test_palettes_cover_every_theme():
	assert set(PALETTES) == set(Theme)
	assert PALETTES[Theme.DARK].ttk_theme != PALETTES[Theme.LIGHT].ttk_theme


def test_view_owns_window_header():
	view = TerminalView(session=TerminalSession())

	assert len(view.components) == 1
	assert isinstance(view.components[0], WindowHeader)
	assert set(view.components[0].actions) == {"close", "minimize", "expand"}


# ---------------------------------------------------------------------------
# Tk wiring
# ---------------------------------------------------------------------------

def _mounted(tk_root, config=None) -> TerminalView:
	view = TerminalView(session=TerminalSession(config))
	view.mount(tk_root)
	view.layout()
	return view


def test_mount_renders_initial_history(tk_root):
	view = _mounted(tk_root, TerminalConfig(history=[HistoryEntry("ls", cwd=""), HistoryEntry("a.txt")]))
	try:
		assert view.mounted
		assert view.rendered_lines() == ["hacker@default ~ $ ls", "a.txt"]
	finally:
		view.destroy()


def test_entry_edits_flow_into_session(tk_root):
	view = _mounted(tk_root)
	try:
		view._input_var.set("echo hi")

		assert view.session.state.input.value == "echo hi"
	finally:
		view.destroy()


def test_return_submits_and_renders(tk_root):
	view = _mounted(tk_root)
	try:
		view.session.change("echo hi")

		assert view._on_return(None) == "break"
		assert view.rendered_lines() == ["hacker@default ~ $ echo hi", "hi"]
		assert view._input_var.get() == ""
	finally:
		view.destroy()


def test_tab_keypress_breaks_and_completes(tk_root):
	view = _mounted(tk_root)
	try:
		view.session.change("ec")

		assert view._on_key_press(_event("Tab")) == "break"
		assert view._input_var.get() == "echo "
	finally:
		view.destroy()


def test_other_keypress_is_not_broken(tk_root):
	view = _mounted(tk_root)
	try:
		assert view._on_key_press(_event("a")) is None
		assert view._on_key_press(_event("Up")) is None
	finally:
		view.destroy()


def test_ctrl_c_release_clears_entry(tk_root):
	view = _mounted(tk_root)
	try:
		view.session.change("oops")

		view._on_key_press(_event("Control_L"))
		view._on_key_press(_event("c"))
		view._on_key_release(_event("c"))
		view._on_key_release(_event("Control_L"))

		assert view._input_var.get() == ""
	finally:
		view.destroy()


def test_destroy_cancels_session_and_playback(tk_root):
	config = TerminalConfig(autotyping=True, messages=[PlaybackMessage("help", speed=50)])
	view = _mounted(tk_root, config)
	session = view.session
	assert session.playback is not None and session.playback.is_active

	view.destroy()

	assert session.destroyed is True
	assert session.playback.is_active is False
	assert view.mounted is False
