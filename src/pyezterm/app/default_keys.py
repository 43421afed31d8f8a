# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default hotkey bindings for pyezterm.
#
# Notes:
#	- This module only declares bindings (policy).
#	- Tab is bound on keydown: the host must cancel focus traversal on
#	  that same event, keyup is too late.
#	- Ctrl+L / Ctrl+C fire on keyup of the letter while Ctrl is held.
#
#	Supported hot keys:
#		ctrl + l	clear
#		ctrl + c	cancel current input
#		up			previous command from history
#		down		next command from history
#		tab			autocomplete
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezterm.app.keys import (
	AUTOCOMPLETE_REQUEST,
	CANCEL_REQUEST,
	CLEAR_REQUEST,
	HISTORY_NEXT,
	HISTORY_PREV,
	SET_CTRL_OFF,
	SET_CTRL_ON,
	KeyChord,
	KeyCode,
	KeyMap,
	KeyPhase,
)


def build_default_keymap() -> KeyMap:
	km = KeyMap()

	# Keydown
	km.bind(KeyChord(KeyCode.CTRL, KeyPhase.DOWN), SET_CTRL_ON)
	km.bind(KeyChord(KeyCode.TAB, KeyPhase.DOWN), AUTOCOMPLETE_REQUEST)

	# Keyup
	km.bind(KeyChord(KeyCode.L, KeyPhase.UP, ctrl=True), CLEAR_REQUEST)
	km.bind(KeyChord(KeyCode.C, KeyPhase.UP, ctrl=True), CANCEL_REQUEST)
	km.bind(KeyChord(KeyCode.UP, KeyPhase.UP), HISTORY_PREV)
	km.bind(KeyChord(KeyCode.DOWN, KeyPhase.UP), HISTORY_NEXT)
	km.bind(KeyChord(KeyCode.CTRL, KeyPhase.UP), SET_CTRL_OFF)

	return km
