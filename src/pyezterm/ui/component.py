# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#   Base UI Component for pyezterm (Tkinter).
#
# Notes:
#   A component owns one root widget plus any child components
#   (TerminalView owns its WindowHeader).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Drop dynamic child add/remove (views are fixed)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	Children are declared before mount(); mount() builds the root widget
	and then mounts each child into it. destroy() runs children first.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		self.id = self.id or str(uuid4())
		self.name = self.name or self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} mounted={self.mounted}>"

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.root)

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(fill="both", expand=True)
		for child in self.components:
			child.layout()

	def destroy(self) -> None:
		for child in self.components:
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
