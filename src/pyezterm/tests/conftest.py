# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for pyezterm tests.
#
# Notes:
#	- ManualClock implements the Clock protocol (after/after_cancel) with a
#	  virtual time base so playback runs deterministically.
#	- tk_root skips when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Iterator

import pytest

from pyezterm.core.logging import _reset_logging_for_tests


class ManualClock:
	"""
	Virtual-time Clock. Timers fire only from advance().
	"""

	def __init__(self) -> None:
		self.now = 0
		self.scheduled: list[int] = []
		self._timers: dict[int, tuple[int, Callable[[], Any]]] = {}
		self._next_id = 0

	def after(self, ms: int, func: Callable[[], Any]) -> int:
		self._next_id += 1
		self._timers[self._next_id] = (self.now + int(ms), func)
		self.scheduled.append(int(ms))
		return self._next_id

	def after_cancel(self, id: Any) -> None:
		self._timers.pop(id, None)

	@property
	def pending(self) -> int:
		return len(self._timers)

	def advance(self, ms: int) -> None:
		target = self.now + ms
		while True:
			due = [(when, tid) for tid, (when, _fn) in self._timers.items() if when <= target]
			if not due:
				break
			when, tid = min(due)
			_when, fn = self._timers.pop(tid)
			self.now = when
			fn()
		self.now = target

	def run_until_idle(self, limit: int = 100_000) -> None:
		steps = 0
		while self._timers:
			when = min(w for w, _fn in self._timers.values())
			self.advance(when - self.now)
			steps += 1
			if steps > limit:
				raise RuntimeError("clock did not go idle")


@pytest.fixture
def clock() -> ManualClock:
	return ManualClock()


@pytest.fixture
def tk_root() -> Iterator[Any]:
	tk = pytest.importorskip("tkinter")
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"no display available: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
	yield
	_reset_logging_for_tests()
