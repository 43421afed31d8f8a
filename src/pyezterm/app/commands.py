# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#   Command definitions, registry and the Command Engine contract.
#
# Notes:
#   - A handler takes (state, args) and returns the next SessionState.
#   - Extensions are merged over built-ins; extensions win on collision.
#   - CommandEngine is the collaborator the session talks to. ShellEngine
#     (engine.py) is the bundled implementation.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add CommandEngine protocol + extend()
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import (
	TYPE_CHECKING,
	Any,
	Callable,
	Iterator,
	Mapping,
	Optional,
	Protocol,
	Union,
	runtime_checkable,
)

if TYPE_CHECKING:
	from pyezterm.app.state import SessionState


CommandHandler = Callable[["SessionState", list[str]], "SessionState"]


class CommandError(Exception):
	"""
	Raised by a handler to report a user-facing failure (e.g. bad args).
	The engine renders the message as an output line.
	"""


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- name:			Word typed at the prompt (required).
	- handler:		Callable (state, args) -> state.
	- description:	Optional one-line help text.
	"""
	name: str
	handler: CommandHandler
	description: Optional[str] = None

	def __call__(self, state: "SessionState", args: list[str]) -> "SessionState":
		return self.handler(state, args)


ExtensionValue = Union[Command, CommandHandler]


class CommandRegistry:
	"""
	CommandRegistry

	Mutable name -> Command mapping.
	"""

	def __init__(self, commands: Optional[Mapping[str, ExtensionValue]] = None) -> None:
		self._commands: dict[str, Command] = {}
		for name, value in (commands or {}).items():
			self.register(_as_command(name, value))

	def register(self, command: Command, *, overwrite: bool = False) -> None:
		if not command.name or any(ch.isspace() for ch in command.name):
			raise ValueError(f"Command name must be a single non-empty word: {command.name!r}")

		if not overwrite and command.name in self._commands:
			raise ValueError(f"Duplicate command name: {command.name!r}")

		self._commands[command.name] = command

	def unregister(self, name: str) -> None:
		self._commands.pop(name, None)

	def has(self, name: str) -> bool:
		return name in self._commands

	def get(self, name: str) -> Optional[Command]:
		return self._commands.get(name)

	def names(self) -> list[str]:
		return list(self._commands.keys())

	def invoke(self, name: str, state: "SessionState", args: Optional[list[str]] = None) -> "SessionState":
		command = self._commands.get(name)
		if command is None:
			raise KeyError(f"Unknown command: {name!r}")
		return command(state, list(args or []))

	def extend(self, extensions: Optional[Mapping[str, ExtensionValue]]) -> None:
		"""
		Register extensions in place, overriding same-named commands.
		"""
		for name, value in (extensions or {}).items():
			self.register(_as_command(name, value), overwrite=True)

	def __contains__(self, name: object) -> bool:
		return name in self._commands

	def __iter__(self) -> Iterator[str]:
		return iter(self._commands)

	def __len__(self) -> int:
		return len(self._commands)

	def __getitem__(self, name: str) -> Command:
		return self._commands[name]

	def __setitem__(self, name: str, value: ExtensionValue) -> None:
		self.register(_as_command(name, value), overwrite=True)


def _as_command(name: str, value: ExtensionValue) -> Command:
	if isinstance(value, Command):
		if value.name == name:
			return value
		return Command(name=name, handler=value.handler, description=value.description)
	if not callable(value):
		raise ValueError(f"Command {name!r} handler must be callable")
	doc = (getattr(value, "__doc__", None) or "").strip()
	return Command(name=name, handler=value, description=doc.splitlines()[0] if doc else None)


@runtime_checkable
class CommandEngine(Protocol):
	"""
	Collaborator that executes command text, tracks executed commands and
	supplies completions. The session trusts whatever state it returns.
	"""
	commands: Any

	def execute(self, input_line: str, state: "SessionState") -> "SessionState": ...

	def autocomplete(self, buffer: str, state: "SessionState") -> Optional[str]: ...

	def has_prev_command(self) -> bool: ...

	def get_prev_command(self) -> Optional[str]: ...

	def has_next_command(self) -> bool: ...

	def get_next_command(self) -> Optional[str]: ...
