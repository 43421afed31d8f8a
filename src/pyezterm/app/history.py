# ---------------------------------------------------------------------------
# File: history.py
# ---------------------------------------------------------------------------
# Description:
#	HistoryNavigator: cursor over executed command strings.
#
# Notes:
#	- Cursor ranges over [0, len(entries)]; len(entries) means "one past
#	  the newest" (nothing selected).
#	- One step per call, no wraparound.
#	- record() never de-duplicates.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class HistoryNavigator:
	_entries: list[str] = field(default_factory=list)
	_cursor: int = 0

	def __post_init__(self) -> None:
		self._cursor = len(self._entries)

	@property
	def entries(self) -> tuple[str, ...]:
		return tuple(self._entries)

	@property
	def cursor(self) -> int:
		return self._cursor

	def record(self, command: str) -> None:
		"""
		Append a submitted command and park the cursor past the newest.
		"""
		self._entries.append(command)
		self._cursor = len(self._entries)

	def reset(self) -> None:
		self._cursor = len(self._entries)

	def has_prev(self) -> bool:
		return self._cursor > 0

	def has_next(self) -> bool:
		return self._cursor < len(self._entries) - 1

	def get_prev(self) -> Optional[str]:
		if not self.has_prev():
			return None
		self._cursor -= 1
		return self._entries[self._cursor]

	def get_next(self) -> Optional[str]:
		if not self.has_next():
			return None
		self._cursor += 1
		return self._entries[self._cursor]

	def __len__(self) -> int:
		return len(self._entries)
