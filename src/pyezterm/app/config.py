# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration objects for pyezterm.
#
# Notes:
#	- TerminalConfig: options for one embedded terminal.
#	  history / structure / extensions use None for "not supplied" so an
#	  update can leave the current value alone.
#	- AppConfig: host window options (logging, telemetry, geometry).
#	- Neither is ever written to disk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Accept camelCase option names
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from pyezterm.app.commands import ExtensionValue
from pyezterm.app.playback import PlaybackMessage
from pyezterm.app.state import DEFAULT_PREFIX, HistoryEntry
from pyezterm.core.logging import get_app_logger


log = get_app_logger("config")


def _noop() -> None:
	return None


class Theme(str, Enum):
	LIGHT = "light"
	DARK = "dark"

	@classmethod
	def coerce(cls, value: Any) -> "Theme":
		if isinstance(value, Theme):
			return value
		try:
			return cls(str(value).lower())
		except ValueError:
			log.warning("unknown theme %r; falling back to light", value)
			return cls.LIGHT


@dataclass(frozen=True, slots=True)
class TerminalConfig:
	history: Optional[Sequence[Any]] = None
	structure: Optional[Mapping[str, Any]] = None
	extensions: Optional[Mapping[str, ExtensionValue]] = None
	prefix: str = DEFAULT_PREFIX
	theme: Theme = Theme.LIGHT
	autotyping: bool = False
	messages: Sequence[PlaybackMessage] = ()
	on_close: Callable[[], Any] = _noop
	on_expand: Callable[[], Any] = _noop
	on_minimize: Callable[[], Any] = _noop

	def __post_init__(self) -> None:
		# Frozen: normalize through object.__setattr__.
		object.__setattr__(self, "theme", Theme.coerce(self.theme))
		object.__setattr__(self, "messages", tuple(PlaybackMessage.coerce(m) for m in self.messages))

	@classmethod
	def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "TerminalConfig":
		"""
		Build a config from a plain mapping (snake_case or camelCase keys).
		"""
		opts = dict(options or {})

		def pick(*keys: str, default: Any = None) -> Any:
			for key in keys:
				if key in opts and opts[key] is not None:
					return opts[key]
			return default

		history = pick("history")
		return cls(
			history=None if history is None else tuple(HistoryEntry.coerce(h) for h in history),
			structure=pick("structure"),
			extensions=pick("extensions"),
			prefix=str(pick("prefix", default=DEFAULT_PREFIX)),
			theme=pick("theme", default=Theme.LIGHT),
			autotyping=bool(pick("autotyping", default=False)),
			messages=tuple(pick("messages", default=())),
			on_close=pick("on_close", "onClose", default=_noop),
			on_expand=pick("on_expand", "onExpand", default=_noop),
			on_minimize=pick("on_minimize", "onMinimize", default=_noop),
		)


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for host window options.
	"""
	options: dict[str, Any] = field(default_factory=dict)

	def get(self, key: str, default: Any = None) -> Any:
		return self.options.get(key, default)
