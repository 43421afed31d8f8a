# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyezterm.
#
# Notes:
#   - Lazy exports (PEP 562); importing pyezterm.ui does not touch Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"TerminalView",
	"WindowHeader",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pyezterm.ui.component", "Component"),
	"TerminalView": ("pyezterm.ui.terminal_view", "TerminalView"),
	"WindowHeader": ("pyezterm.ui.terminal_view", "WindowHeader"),
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
	from pyezterm.ui.component import Component
	from pyezterm.ui.terminal_view import TerminalView, WindowHeader
