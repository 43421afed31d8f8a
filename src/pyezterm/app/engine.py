# ---------------------------------------------------------------------------
# File: engine.py
# ---------------------------------------------------------------------------
# Description:
#	ShellEngine: the bundled Command Engine.
#
# Notes:
#	- Whitespace splitting only; no pipes, quoting or redirection.
#	- Owns the HistoryNavigator over executed command lines.
#	- CommandError from a handler becomes an output line; anything else
#	  propagates to the caller.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add first-word autocomplete
# 10/17/2026	Paul G. LeDuc				Blank submit resets the history cursor
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Mapping, Optional

from pyezterm.app.commands import CommandError, CommandRegistry, ExtensionValue
from pyezterm.app.default_commands import build_registry
from pyezterm.app.history import HistoryNavigator
from pyezterm.app.state import HistoryEntry, SessionState, append_history
from pyezterm.core.logging import get_app_logger


log = get_app_logger("engine")


class ShellEngine:
	"""
	ShellEngine

	Executes a command line against a registry of (state, args) -> state
	handlers and records what was run for Up/Down navigation.
	"""

	def __init__(self, extensions: Optional[Mapping[str, ExtensionValue]] = None) -> None:
		self.commands: CommandRegistry = build_registry(extensions)
		self.history = HistoryNavigator()

	# -----------------------------------------------------------------------
	# Execution
	# -----------------------------------------------------------------------

	def execute(self, input_line: str, state: SessionState) -> SessionState:
		# Echo the prompt line first; "clear" then wipes it along with the rest.
		state = append_history(state, HistoryEntry(value=input_line, cwd=state.cwd))

		words = input_line.split()
		if not words:
			# Not recorded, but Up starts again from the newest command.
			self.history.reset()
			return state

		self.history.record(input_line)

		name, args = words[0], words[1:]
		command = self.commands.get(name)
		if command is None:
			log.debug("unknown command %r", name)
			return append_history(state, HistoryEntry(f"{name}: command not found"))

		try:
			return command(state, args)
		except CommandError as ex:
			log.debug("command %r failed: %s", name, ex)
			return append_history(state, HistoryEntry(f"{name}: {ex}"))

	# -----------------------------------------------------------------------
	# Completion
	# -----------------------------------------------------------------------

	def autocomplete(self, buffer: str, state: SessionState) -> Optional[str]:
		"""
		Complete the first word against command names.

		Only a single unambiguous match yields a suggestion.
		"""
		word = buffer.lstrip()
		if not word or any(ch.isspace() for ch in word):
			return None

		matches = [name for name in self.commands.names() if name.startswith(word)]
		if len(matches) != 1:
			return None
		return f"{matches[0]} "

	# -----------------------------------------------------------------------
	# History navigation
	# -----------------------------------------------------------------------

	def has_prev_command(self) -> bool:
		return self.history.has_prev()

	def get_prev_command(self) -> Optional[str]:
		return self.history.get_prev()

	def has_next_command(self) -> bool:
		return self.history.has_next()

	def get_next_command(self) -> Optional[str]:
		return self.history.get_next()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} commands={len(self.commands)} history={len(self.history)}>"
