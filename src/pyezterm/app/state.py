# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	Session state value types + pure transitions for pyezterm.
#
# Notes:
#	- SessionState is frozen. Every transition returns a new instance, or
#	  the same instance when nothing changed (identity gating relies on it).
#	- history / structure handed in by a host are copied on entry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Deep-copy structure into a read-only mapping
# ---------------------------------------------------------------------------

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from pyezterm.core.logging import get_app_logger


log = get_app_logger("state")

DEFAULT_PREFIX = "hacker@default"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
	"""
	One scrollback line. cwd set -> command line (rendered with prompt),
	cwd None -> plain output.
	"""
	value: str
	cwd: Optional[str] = None

	@property
	def is_command(self) -> bool:
		return self.cwd is not None

	@classmethod
	def coerce(cls, item: Union["HistoryEntry", Mapping[str, Any], str]) -> "HistoryEntry":
		if isinstance(item, HistoryEntry):
			return item
		if isinstance(item, str):
			return cls(value=item)
		cwd = item.get("cwd")
		return cls(value=str(item.get("value") or ""), cwd=None if cwd is None else str(cwd))


@dataclass(frozen=True, slots=True)
class Settings:
	username: str = ""


@dataclass(frozen=True, slots=True)
class InputState:
	value: str = ""


def _empty_structure() -> Mapping[str, Any]:
	return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class SessionState:
	settings: Settings = field(default_factory=Settings)
	history: tuple[HistoryEntry, ...] = ()
	structure: Mapping[str, Any] = field(default_factory=_empty_structure)
	cwd: str = ""
	input: InputState = field(default_factory=InputState)

	@property
	def buffer(self) -> str:
		return self.input.value


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def username_from_prefix(prefix: Optional[str]) -> str:
	"""
	Username is the segment after '@' ("hacker@default" -> "default").

	A prefix without '@' degrades to the whole string; None/empty -> "".
	"""
	if not prefix:
		return ""
	parts = prefix.split("@")
	if len(parts) < 2:
		log.warning("prefix %r has no '@'; using it whole as username", prefix)
		return prefix
	return parts[1]


def copy_history(history: Optional[Iterable[Any]]) -> tuple[HistoryEntry, ...]:
	if history is None:
		return ()
	return tuple(HistoryEntry.coerce(item) for item in history)


def copy_structure(structure: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
	if not structure:
		return _empty_structure()
	return MappingProxyType(copy.deepcopy(dict(structure)))


def initial_state(
	*,
	prefix: Optional[str] = DEFAULT_PREFIX,
	history: Optional[Iterable[Any]] = None,
	structure: Optional[Mapping[str, Any]] = None,
) -> SessionState:
	return SessionState(
		settings=Settings(username=username_from_prefix(prefix)),
		history=copy_history(history),
		structure=copy_structure(structure),
		cwd="",
		input=InputState(""),
	)


# ---------------------------------------------------------------------------
# Transitions (state, ...) -> state'
# ---------------------------------------------------------------------------

def with_input(state: SessionState, value: str) -> SessionState:
	if state.input.value == value:
		return state
	return replace(state, input=InputState(value))


def append_input(state: SessionState, chars: str) -> SessionState:
	if not chars:
		return state
	return replace(state, input=InputState(state.input.value + chars))


def clear_input(state: SessionState) -> SessionState:
	return with_input(state, "")


def with_history(state: SessionState, history: Iterable[Any]) -> SessionState:
	return replace(state, history=copy_history(history))


def with_structure(state: SessionState, structure: Mapping[str, Any]) -> SessionState:
	return replace(state, structure=copy_structure(structure))


def append_history(state: SessionState, *entries: HistoryEntry) -> SessionState:
	if not entries:
		return state
	return replace(state, history=state.history + tuple(entries))


def submitted(state: SessionState) -> SessionState:
	"""
	State after a submit: whatever the engine returned, with an empty buffer.
	"""
	return clear_input(state)
