# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   App: Tk host window for one or more pyezterm terminals.
#
# Notes:
#   - Initializes logging + telemetry from AppConfig before any session
#     exists.
#   - Each terminal is a TerminalView wrapping its own TerminalSession.
#   - destroy() tears down every terminal (and so every playback) first.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add terminal ownership + teardown
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from pyezterm.app.commands import CommandEngine
from pyezterm.app.config import AppConfig, TerminalConfig
from pyezterm.app.session import TerminalSession
from pyezterm.core.logging import get_app_logger, init_logging
from pyezterm.core.telemetry import init_telemetry
from pyezterm.ui.terminal_view import TerminalView


class App(tk.Tk):
	"""
	App

	Root window hosting terminal views.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(dict(cfg or {}))
		init_logging(self.cfg)
		self.log = get_app_logger()
		self.telemetry = init_telemetry(self.cfg.options, logger=get_app_logger("telemetry"))

		self.title_text = title or "pyezterm"
		self.title(self.title_text)

		self.terminals: list[TerminalView] = []

		self.update_idletasks()
		self._apply_geometry(width, height)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.protocol("WM_DELETE_WINDOW", self.destroy)

	# -----------------------------------------------------------------------
	# Terminals
	# -----------------------------------------------------------------------

	def add_terminal(
		self,
		config: Optional[TerminalConfig] = None,
		*,
		engine: Optional[CommandEngine] = None,
	) -> TerminalView:
		"""
		Create a session + view and mount it (autotyping starts here).
		"""
		session = TerminalSession(config, engine=engine, telemetry=self.telemetry)
		view = TerminalView(session=session, name="terminal")

		self.terminals.append(view)
		view.mount(self.root_frame)
		view.layout()

		self.log.info("terminal %s mounted", session.id)
		return view

	def remove_terminal(self, view: TerminalView) -> None:
		if view not in self.terminals:
			return
		self.terminals.remove(view)
		view.destroy()

	def destroy(self) -> None:
		for view in list(self.terminals):
			view.destroy()
		self.terminals.clear()
		super().destroy()

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width or 720, screen_w))
		win_h = max(1, min(height or 420, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.mainloop()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r} terminals={len(self.terminals)}>"
