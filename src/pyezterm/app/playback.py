# ---------------------------------------------------------------------------
# File: playback.py
# ---------------------------------------------------------------------------
# Description:
#	Scripted playback ("autotyping") for pyezterm.
#
# Notes:
#	- State machine: IDLE -> TYPING -> (PAUSED -> TYPING)* -> IDLE.
#	- Driven by a Clock with the Tk after()/after_cancel() signature, so a
#	  Tk widget can be passed directly.
#	- At most one timer is pending at any time.
#	- One character per tick. The tick after the last character submits
#	  once, then pauses for the message timeout if more messages remain.
#	- start() while not IDLE is rejected.
#	- A CancellationToken ties the scheduler to its owner's lifetime.
#
#	Messages are of the form:
#		PlaybackMessage(text="ls", speed=80, timeout=500)
#		{"text": "ls", "speed": 80, "timeout": 500}
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add CancellationToken + generation guard
# 10/17/2026	Paul G. LeDuc				Skip the trailing pause after the last message
# 10/17/2026	Paul G. LeDuc				Return to IDLE when an owner callback raises
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

from pyezterm.core.logging import get_app_logger
from pyezterm.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("playback")

DEFAULT_SPEED_MS = 100


# ---------------------------------------------------------------------------
# Clock + cancellation
# ---------------------------------------------------------------------------

@runtime_checkable
class Clock(Protocol):
	"""
	Timer source. tkinter.Misc satisfies this protocol.
	"""
	def after(self, ms: int, func: Callable[[], Any]) -> Any: ...

	def after_cancel(self, id: Any) -> None: ...


class CancellationToken:
	"""
	One-shot cancellation signal shared between an owner and its timers.
	"""

	def __init__(self) -> None:
		self._cancelled = False
		self._callbacks: list[Callable[[], None]] = []

	@property
	def cancelled(self) -> bool:
		return self._cancelled

	def cancel(self) -> None:
		if self._cancelled:
			return
		self._cancelled = True
		callbacks, self._callbacks = self._callbacks, []
		for cb in callbacks:
			cb()

	def on_cancel(self, cb: Callable[[], None]) -> Callable[[], None]:
		"""
		Register cb to run on cancel (immediately if already cancelled).
		Returns a function that unregisters it.
		"""
		if self._cancelled:
			cb()
			return lambda: None

		self._callbacks.append(cb)

		def _remove() -> None:
			if cb in self._callbacks:
				self._callbacks.remove(cb)

		return _remove


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlaybackMessage:
	text: str
	speed: int = DEFAULT_SPEED_MS
	timeout: int = 0

	@classmethod
	def coerce(cls, item: Union["PlaybackMessage", Mapping[str, Any]]) -> "PlaybackMessage":
		if isinstance(item, PlaybackMessage):
			return item
		return cls(
			text=str(item.get("text") or ""),
			speed=_non_negative_ms(item.get("speed"), DEFAULT_SPEED_MS),
			timeout=_non_negative_ms(item.get("timeout"), 0),
		)


def _non_negative_ms(value: Any, default: int) -> int:
	if value is None:
		return default
	try:
		return max(0, int(value))
	except (TypeError, ValueError):
		log.warning("invalid playback delay %r; using %d ms", value, default)
		return default


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------

class PlaybackPhase(str, Enum):
	IDLE = "idle"
	TYPING = "typing"
	PAUSED = "paused"


class PlaybackScheduler:
	"""
	PlaybackScheduler

	Types queued messages one character per tick through on_char() and
	calls on_submit() once per message after its text is fully typed.
	"""

	def __init__(
		self,
		clock: Clock,
		on_char: Callable[[str], None],
		on_submit: Callable[[], None],
		*,
		token: Optional[CancellationToken] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._clock = clock
		self._on_char = on_char
		self._on_submit = on_submit
		self._token = token or CancellationToken()
		self._telemetry = telemetry

		self._queue: deque[PlaybackMessage] = deque()
		self._current: Optional[PlaybackMessage] = None
		self._remaining: deque[str] = deque()
		self._phase = PlaybackPhase.IDLE
		self._handle: Any = None

		# Bumped on every start/cancel; stale timer callbacks compare against it.
		self._generation = 0

		self._token.on_cancel(self.cancel)

	# -----------------------------------------------------------------------
	# Introspection
	# -----------------------------------------------------------------------

	@property
	def phase(self) -> PlaybackPhase:
		return self._phase

	@property
	def is_active(self) -> bool:
		return self._phase is not PlaybackPhase.IDLE

	@property
	def remaining_text(self) -> str:
		return "".join(self._remaining)

	@property
	def pending_messages(self) -> int:
		return len(self._queue)

	@property
	def has_pending_timer(self) -> bool:
		return self._handle is not None

	@property
	def token(self) -> CancellationToken:
		return self._token

	# -----------------------------------------------------------------------
	# Control
	# -----------------------------------------------------------------------

	def start(self, messages: Iterable[Union[PlaybackMessage, Mapping[str, Any]]]) -> bool:
		"""
		Begin playback of messages.

		Returns:
			True if playback started, False if rejected (already active or
			the owner is torn down).
		"""
		if self._token.cancelled:
			log.warning("playback start ignored: owner already torn down")
			return False

		if self.is_active:
			log.warning("playback start rejected: playback already %s", self._phase.value)
			return False

		self._generation += 1
		self._queue = deque(PlaybackMessage.coerce(m) for m in messages)

		log.info("playback started (%d messages)", len(self._queue))
		self._tel().event("playback.started", {"messages": len(self._queue)})

		self._next_message()
		return True

	def cancel(self) -> None:
		"""
		Stop playback: cancel the pending timer and drop the queue.
		"""
		if not self.is_active and self._handle is None:
			return

		self._generation += 1
		if self._handle is not None:
			self._clock.after_cancel(self._handle)
			self._handle = None

		dropped = len(self._queue)
		self._queue.clear()
		self._remaining.clear()
		self._current = None
		self._phase = PlaybackPhase.IDLE

		log.info("playback cancelled (%d messages dropped)", dropped)
		self._tel().event("playback.cancelled", {"dropped": dropped})

	# -----------------------------------------------------------------------
	# State machine
	# -----------------------------------------------------------------------

	def _next_message(self) -> None:
		if not self._queue:
			self._finish()
			return

		msg = self._queue.popleft()
		self._current = msg
		self._remaining = deque(msg.text)
		self._phase = PlaybackPhase.TYPING

		log.debug("typing %r at %d ms/char", msg.text, msg.speed)
		self._arm(msg.speed, self._tick)

	def _tick(self) -> None:
		msg = self._current
		if msg is None:
			return

		if self._remaining:
			generation = self._generation
			self._deliver(self._on_char, self._remaining.popleft())
			# on_char may have torn us down.
			if generation != self._generation:
				return
			self._arm(msg.speed, self._tick)
			return

		generation = self._generation
		self._deliver(self._on_submit)
		self._tel().event("playback.submitted", {"text": msg.text})
		if generation != self._generation:
			return

		if not self._queue:
			self._finish()
			return

		self._phase = PlaybackPhase.PAUSED
		self._arm(msg.timeout, self._next_message)

	def _deliver(self, fn: Callable[..., None], *args: Any) -> None:
		try:
			fn(*args)
		except BaseException:
			# Back to IDLE so the next start() is accepted.
			log.warning("playback aborted: owner callback raised")
			self.cancel()
			raise

	def _finish(self) -> None:
		self._current = None
		self._remaining.clear()
		self._phase = PlaybackPhase.IDLE
		self._handle = None

		log.info("playback finished")
		self._tel().event("playback.finished")

	def _arm(self, ms: int, fn: Callable[[], None]) -> None:
		generation = self._generation

		def _fire() -> None:
			if generation != self._generation or self._token.cancelled:
				return
			self._handle = None
			fn()

		self._handle = self._clock.after(ms, _fire)

	def _tel(self) -> Telemetry:
		return self._telemetry or get_telemetry()
