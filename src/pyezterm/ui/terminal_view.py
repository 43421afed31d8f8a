# ---------------------------------------------------------------------------
# File: terminal_view.py
# ---------------------------------------------------------------------------
# Description:
#	TerminalView: Tk presentation layer for a TerminalSession.
#
# Notes:
#	- Renders scrollback, prompt and input; all state lives in the session.
#	- Key events are translated to browser-style key codes and forwarded.
#	  Tab is handled on KeyPress so "break" stops focus traversal.
#	- The view's Tk root doubles as the playback Clock (after/after_cancel).
#	- Destroying the view tears down the session it presents.
#	- Theme: light/dark palettes, ttk styling through ttkthemes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add WindowHeader (close/minimize/expand)
# 10/17/2026	Paul G. LeDuc				Apply ttkthemes per Theme
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pyezterm.app.config import Theme
from pyezterm.app.keys import KeyCode, KeyPhase
from pyezterm.app.session import TerminalSession
from pyezterm.app.state import HistoryEntry, SessionState
from pyezterm.core.logging import get_app_logger

from .component import Component


log = get_app_logger("ui.terminal")


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Palette:
	ttk_theme: str
	background: str
	foreground: str
	prefix: str
	header: str
	font: tuple[str, int] = ("Courier", 12)


PALETTES: dict[Theme, Palette] = {
	Theme.LIGHT: Palette(
		ttk_theme="arc",
		background="#ffffff",
		foreground="#5d5d5d",
		prefix="#bd081c",
		header="#dddddd",
	),
	Theme.DARK: Palette(
		ttk_theme="equilux",
		background="#000000",
		foreground="#dddddd",
		prefix="#05c46b",
		header="#555555",
	),
}

_HEADER_CIRCLES = (
	("close", "#fc615d"),
	("minimize", "#fdbc40"),
	("expand", "#34c84a"),
)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

_KEYSYM_CODES: dict[str, int] = {
	"Control_L": KeyCode.CTRL,
	"Control_R": KeyCode.CTRL,
	"Tab": KeyCode.TAB,
	"Up": KeyCode.UP,
	"Down": KeyCode.DOWN,
}


def keysym_to_code(keysym: str) -> int:
	"""
	Map a Tk keysym to the browser key code the core expects.

	Letters map to their upper-case ASCII code; unknown keys map to 0.
	"""
	code = _KEYSYM_CODES.get(keysym)
	if code is not None:
		return int(code)
	if len(keysym) == 1 and keysym.isalnum():
		return ord(keysym.upper())
	return 0


def format_prompt(prefix: str, cwd: str) -> str:
	return f"{prefix} ~{cwd} $"


def format_history_line(entry: HistoryEntry, prefix: str) -> str:
	if entry.cwd is None:
		return entry.value
	return f"{format_prompt(prefix, entry.cwd)} {entry.value}"


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

@dataclass
class WindowHeader(Component):
	"""
	Title-bar strip with the three window circles.
	"""
	palette: Palette = field(default_factory=lambda: PALETTES[Theme.LIGHT])
	actions: dict[str, Callable[[], Any]] = field(default_factory=dict)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = tk.Frame(parent, background=self.palette.header, height=24)

		for name, color in _HEADER_CIRCLES:
			dot = tk.Canvas(frame, width=16, height=16, highlightthickness=0, background=self.palette.header)
			dot.create_oval(2, 2, 14, 14, fill=color, outline=color)
			dot.pack(side="left", padx=(6, 0), pady=4)

			action = self.actions.get(name)
			if action is not None:
				dot.bind("<Button-1>", lambda _e, fn=action: fn())

		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="top", fill="x")


# ---------------------------------------------------------------------------
# TerminalView
# ---------------------------------------------------------------------------

@dataclass
class TerminalView(Component):
	"""
	TerminalView

	Presents one TerminalSession and forwards UI events into it.
	"""
	session: TerminalSession = field(kw_only=True)

	_text: Optional[tk.Text] = field(default=None, init=False, repr=False)
	_prompt: Optional[tk.Label] = field(default=None, init=False, repr=False)
	_entry: Optional[tk.Entry] = field(default=None, init=False, repr=False)
	_input_var: Optional[tk.StringVar] = field(default=None, init=False, repr=False)
	_syncing: bool = field(default=False, init=False, repr=False)
	_unsubscribe: Optional[Callable[[], None]] = field(default=None, init=False, repr=False)

	@property
	def palette(self) -> Palette:
		return PALETTES.get(self.session.config.theme, PALETTES[Theme.LIGHT])

	def __post_init__(self) -> None:
		super().__post_init__()
		self.components.append(WindowHeader(
			palette=self.palette,
			actions={
				"close": self.session.close,
				"minimize": self.session.minimize,
				"expand": self.session.expand,
			},
		))

	# -----------------------------------------------------------------------
	# Build / layout
	# -----------------------------------------------------------------------

	def build(self, parent: tk.Misc) -> tk.Widget:
		palette = self.palette
		ThemedStyle(parent).set_theme(palette.ttk_theme)

		frame = ttk.Frame(parent)

		body = tk.Frame(frame, background=palette.background)
		body.pack(side="bottom", fill="both", expand=True)

		self._text = tk.Text(
			body,
			wrap="word",
			height=12,
			borderwidth=0,
			highlightthickness=0,
			background=palette.background,
			foreground=palette.foreground,
			font=palette.font,
		)
		self._text.tag_configure("prefix", foreground=palette.prefix)
		self._text.pack(side="top", fill="both", expand=True, padx=8, pady=(8, 0))
		self._text.configure(state="disabled")

		form = tk.Frame(body, background=palette.background)
		form.pack(side="bottom", fill="x", padx=8, pady=(0, 8))

		self._prompt = tk.Label(
			form,
			background=palette.background,
			foreground=palette.prefix,
			font=palette.font,
		)
		self._prompt.pack(side="left")

		self._input_var = tk.StringVar(master=form)
		self._entry = tk.Entry(
			form,
			textvariable=self._input_var,
			borderwidth=0,
			highlightthickness=0,
			background=palette.background,
			foreground=palette.foreground,
			insertbackground=palette.foreground,
			font=palette.font,
		)
		self._entry.pack(side="left", fill="x", expand=True, padx=(6, 0))

		self._input_var.trace_add("write", self._on_input_write)
		self._entry.bind("<KeyPress>", self._on_key_press)
		self._entry.bind("<KeyRelease>", self._on_key_release)
		self._entry.bind("<Return>", self._on_return)
		body.bind("<Button-1>", lambda _e: self.focus())

		self._unsubscribe = self.session.subscribe(self.render)
		self.render(self.session.state)

		return frame

	def mount(self, parent: tk.Misc) -> None:
		super().mount(parent)
		# Tk widgets satisfy the Clock protocol (after/after_cancel).
		self.session.mount(clock=self.root)
		self.focus()

	def focus(self) -> None:
		if self._entry is not None:
			self._entry.focus_set()

	# -----------------------------------------------------------------------
	# Rendering
	# -----------------------------------------------------------------------

	def render(self, state: SessionState) -> None:
		if self._text is None or self._prompt is None or self._input_var is None:
			return

		prefix = self.session.config.prefix

		self._text.configure(state="normal")
		self._text.delete("1.0", "end")
		for entry in state.history:
			if entry.cwd is not None:
				self._text.insert("end", format_prompt(prefix, entry.cwd) + " ", ("prefix",))
			self._text.insert("end", entry.value + "\n")
		self._text.configure(state="disabled")
		self._text.see("end")

		self._prompt.configure(text=format_prompt(prefix, state.cwd))

		if self._input_var.get() != state.input.value:
			self._syncing = True
			try:
				self._input_var.set(state.input.value)
			finally:
				self._syncing = False
			if self._entry is not None:
				self._entry.icursor("end")

	def rendered_lines(self) -> list[str]:
		if self._text is None:
			return []
		content = self._text.get("1.0", "end-1c")
		return content.splitlines()

	# -----------------------------------------------------------------------
	# Tk event handlers
	# -----------------------------------------------------------------------

	def _on_input_write(self, *_args: Any) -> None:
		if self._syncing or self._input_var is None:
			return
		self.session.change(self._input_var.get())

	def _on_key_press(self, event: tk.Event) -> Optional[str]:
		outcome = self.session.handle_key(keysym_to_code(event.keysym), KeyPhase.DOWN)
		return "break" if outcome.prevent_default else None

	def _on_key_release(self, event: tk.Event) -> None:
		self.session.handle_key(keysym_to_code(event.keysym), KeyPhase.UP)

	def _on_return(self, _event: tk.Event) -> str:
		self.session.submit()
		return "break"

	# -----------------------------------------------------------------------
	# Teardown
	# -----------------------------------------------------------------------

	def destroy(self) -> None:
		if self._unsubscribe is not None:
			self._unsubscribe()
			self._unsubscribe = None

		self.session.destroy()

		self._text = None
		self._prompt = None
		self._entry = None
		self._input_var = None

		super().destroy()
