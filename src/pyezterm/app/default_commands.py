# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Built-in commands for the bundled ShellEngine.
#
# Notes:
#	- Keep this small. No filesystem semantics: cwd is only echoed.
#	- "clear" must exist: Ctrl+L is routed through it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add whoami / pwd
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from pyezterm.app.commands import Command, CommandRegistry, ExtensionValue
from pyezterm.app.state import HistoryEntry, SessionState, append_history


def _clear(state: SessionState, args: list[str]) -> SessionState:
	return replace(state, history=())


def _echo(state: SessionState, args: list[str]) -> SessionState:
	return append_history(state, HistoryEntry(" ".join(args)))


def _whoami(state: SessionState, args: list[str]) -> SessionState:
	return append_history(state, HistoryEntry(state.settings.username))


def _pwd(state: SessionState, args: list[str]) -> SessionState:
	return append_history(state, HistoryEntry(f"/{state.cwd}"))


def register_default_commands(registry: CommandRegistry) -> None:
	registry.register(Command(
		name="clear",
		handler=_clear,
		description="Clear the terminal screen.",
	))

	registry.register(Command(
		name="echo",
		handler=_echo,
		description="Print the given arguments.",
	))

	registry.register(Command(
		name="whoami",
		handler=_whoami,
		description="Print the current user name.",
	))

	registry.register(Command(
		name="pwd",
		handler=_pwd,
		description="Print the current working directory.",
	))

	# help reads the registry it lives in, so late-registered extensions show up.
	def _help(state: SessionState, args: list[str]) -> SessionState:
		lines = []
		for name in sorted(registry.names()):
			command = registry.get(name)
			desc = command.description if command and command.description else ""
			lines.append(HistoryEntry(f"{name:<10}{desc}".rstrip()))
		return append_history(state, *lines)

	registry.register(Command(
		name="help",
		handler=_help,
		description="List available commands.",
	))


def build_registry(extensions: Optional[Mapping[str, ExtensionValue]] = None) -> CommandRegistry:
	"""
	Built-ins first, then extensions on top (extensions win name collisions).
	"""
	registry = CommandRegistry()
	register_default_commands(registry)
	registry.extend(extensions)
	return registry
