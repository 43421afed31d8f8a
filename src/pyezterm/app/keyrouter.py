# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	KeyRouter for pyezterm (key event -> intent).
#
# Notes:
#	- Pure: the router holds no modifier state. Callers thread the current
#	  ModifierState through every call and apply SET_CTRL intents themselves.
#	- Anything without a binding is NOOP.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add telemetry (keys.pressed, key.unhandled)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from pyezterm.app.default_keys import build_default_keymap
from pyezterm.app.keys import NOOP, Intent, KeyPhase, ModifierState
from pyezterm.core.telemetry import Telemetry, get_telemetry


@runtime_checkable
class KeyMapLike(Protocol):
	"""
	Minimal interface KeyRouter needs from a keymap.
	"""
	def resolve(self, key_code: int, phase: KeyPhase, modifiers: ModifierState) -> Optional[Intent]:
		...


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	Interprets (key code, phase, modifiers) into an Intent using a keymap.
	"""
	keymap: KeyMapLike = field(default_factory=build_default_keymap)
	telemetry: Optional[Telemetry] = None

	def interpret(self, key_code: int, phase: KeyPhase, modifiers: ModifierState) -> Intent:
		"""
		Resolve a key event to an intent.

		Returns:
			The bound Intent, or NOOP when nothing matches.
		"""
		phase = KeyPhase(phase)
		telemetry = self.telemetry or get_telemetry()
		attrs = {"key_code": int(key_code), "phase": phase.value}

		telemetry.counter("keys.pressed", 1, attrs)

		intent = self.keymap.resolve(key_code, phase, modifiers)
		if intent is None:
			telemetry.event("key.unhandled", attrs)
			return NOOP

		return intent
