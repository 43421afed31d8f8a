# ---------------------------------------------------------------------------
# File: autocomplete.py
# ---------------------------------------------------------------------------
# Description:
#	AutocompleteBridge: buffer + state -> engine completer -> new buffer.
#
# Notes:
#	- A truthy suggestion fully replaces the buffer (no merge/append).
#	- A falsy suggestion leaves the state object untouched.
#	- Disambiguation between candidates is the engine's job.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyezterm.app.commands import CommandEngine
from pyezterm.app.state import SessionState, with_input
from pyezterm.core.logging import get_app_logger


log = get_app_logger("autocomplete")


@dataclass(slots=True)
class AutocompleteBridge:
	engine: CommandEngine

	def complete(self, buffer: str, state: SessionState) -> Optional[str]:
		suggestion = self.engine.autocomplete(buffer, state)
		if not suggestion:
			return None
		return str(suggestion)

	def apply(self, state: SessionState) -> SessionState:
		suggestion = self.complete(state.input.value, state)
		if suggestion is None:
			return state

		log.debug("autocomplete %r -> %r", state.input.value, suggestion)
		return with_input(state, suggestion)
