# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Key event vocabulary + KeyMap for pyezterm (key chord -> intent).
#
# Notes:
#   Pure mapping, UI-toolkit-agnostic. Key codes are the browser "which"
#   values so hosts can forward DOM events unchanged; the Tk view
#   translates keysyms into the same codes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add ModifierState + wildcard chords
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional


class KeyCode(IntEnum):
	TAB = 9
	CTRL = 17
	UP = 38
	DOWN = 40
	C = 67
	L = 76


class KeyPhase(str, Enum):
	DOWN = "down"
	UP = "up"


@dataclass(frozen=True, slots=True)
class ModifierState:
	"""
	Currently-held hotkey modifiers. Replaced, never mutated.
	"""
	ctrl_pressed: bool = False

	def with_ctrl(self, pressed: bool) -> "ModifierState":
		if pressed == self.ctrl_pressed:
			return self
		return ModifierState(ctrl_pressed=pressed)


class IntentKind(str, Enum):
	NOOP = "noop"
	SET_CTRL = "set_ctrl"
	CLEAR = "clear"
	CANCEL = "cancel"
	HISTORY_PREV = "history_prev"
	HISTORY_NEXT = "history_next"
	AUTOCOMPLETE = "autocomplete"


@dataclass(frozen=True, slots=True)
class Intent:
	kind: IntentKind
	# Only meaningful for SET_CTRL.
	ctrl: bool = False

	@property
	def is_noop(self) -> bool:
		return self.kind is IntentKind.NOOP


NOOP = Intent(IntentKind.NOOP)
SET_CTRL_ON = Intent(IntentKind.SET_CTRL, ctrl=True)
SET_CTRL_OFF = Intent(IntentKind.SET_CTRL, ctrl=False)
CLEAR_REQUEST = Intent(IntentKind.CLEAR)
CANCEL_REQUEST = Intent(IntentKind.CANCEL)
HISTORY_PREV = Intent(IntentKind.HISTORY_PREV)
HISTORY_NEXT = Intent(IntentKind.HISTORY_NEXT)
AUTOCOMPLETE_REQUEST = Intent(IntentKind.AUTOCOMPLETE)


@dataclass(frozen=True, slots=True)
class KeyChord:
	"""
	KeyChord

	- key_code:	Key code (KeyCode member or any int).
	- phase:	DOWN or UP.
	- ctrl:		True/False to require a Ctrl state, None to match either.
	"""
	key_code: int
	phase: KeyPhase
	ctrl: Optional[bool] = None

	def __str__(self) -> str:
		mod = {True: "Ctrl+", False: "!Ctrl+", None: ""}[self.ctrl]
		try:
			name = KeyCode(self.key_code).name
		except ValueError:
			name = str(self.key_code)
		return f"<{mod}{name}:{self.phase.value}>"


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of key chords to intents. Resolution prefers a chord
	with an exact Ctrl requirement over a Ctrl-agnostic one.
	"""
	_bindings: dict[KeyChord, Intent] = field(default_factory=dict)

	def bind(self, chord: KeyChord, intent: Intent, *, overwrite: bool = True) -> None:
		if not isinstance(chord, KeyChord):
			raise ValueError("chord must be a KeyChord")
		if not isinstance(intent, Intent) or intent.is_noop:
			raise ValueError("intent must be a non-NOOP Intent")

		if not overwrite and chord in self._bindings:
			raise ValueError(f"Key binding already exists for {chord}")

		self._bindings[chord] = intent

	def unbind(self, chord: KeyChord) -> None:
		self._bindings.pop(chord, None)

	def resolve(self, key_code: int, phase: KeyPhase, modifiers: ModifierState) -> Optional[Intent]:
		exact = self._bindings.get(KeyChord(int(key_code), phase, modifiers.ctrl_pressed))
		if exact is not None:
			return exact
		return self._bindings.get(KeyChord(int(key_code), phase, None))

	def chords(self) -> list[KeyChord]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[KeyChord, Intent]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()
