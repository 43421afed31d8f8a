# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyezterm.
#
# Notes:
#   - Lazy exports (PEP 562) so importing the core never pulls in Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"TerminalSession",
	"TerminalConfig",
	"Theme",
	"ShellEngine",
	"PlaybackMessage",
	"HistoryEntry",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pyezterm.app.app", "App"),
	"TerminalSession": ("pyezterm.app.session", "TerminalSession"),
	"TerminalConfig": ("pyezterm.app.config", "TerminalConfig"),
	"Theme": ("pyezterm.app.config", "Theme"),
	"ShellEngine": ("pyezterm.app.engine", "ShellEngine"),
	"PlaybackMessage": ("pyezterm.app.playback", "PlaybackMessage"),
	"HistoryEntry": ("pyezterm.app.state", "HistoryEntry"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezterm.app.app import App
	from pyezterm.app.config import TerminalConfig, Theme
	from pyezterm.app.engine import ShellEngine
	from pyezterm.app.playback import PlaybackMessage
	from pyezterm.app.session import TerminalSession
	from pyezterm.app.state import HistoryEntry
