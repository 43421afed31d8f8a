# ---------------------------------------------------------------------------
# File: session.py
# ---------------------------------------------------------------------------
# Description:
#	TerminalSession: owns one terminal's SessionState and applies every
#	transition (keys, input changes, submits, playback ticks, updates).
#
# Notes:
#	- Single-threaded: callers deliver events one at a time from the host
#	  event loop. User typing and playback ticks are not arbitrated
#	  (last write wins on the buffer).
#	- Listeners are notified only when the state or config object changed
#	  by identity.
#	- destroy() cancels the session token, which stops any playback.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Thread ModifierState through handle_key
# 10/17/2026	Paul G. LeDuc				Add identity-gated commit + listeners
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional
from uuid import uuid4

from pyezterm.app.autocomplete import AutocompleteBridge
from pyezterm.app.commands import CommandEngine
from pyezterm.app.config import TerminalConfig
from pyezterm.app.default_commands import build_registry
from pyezterm.app.engine import ShellEngine
from pyezterm.app.keyrouter import KeyRouter
from pyezterm.app.keys import NOOP, Intent, IntentKind, KeyPhase, ModifierState
from pyezterm.app.playback import CancellationToken, Clock, PlaybackScheduler
from pyezterm.app.state import (
	SessionState,
	append_input,
	clear_input,
	initial_state,
	submitted,
	with_history,
	with_input,
	with_structure,
)
from pyezterm.core.logging import get_app_logger
from pyezterm.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("session")

StateListener = Callable[[SessionState], None]


@dataclass(frozen=True, slots=True)
class KeyOutcome:
	"""
	Result of one key event.

	- intent:			What the key meant.
	- modifiers:		Modifier state to thread into the next event.
	- prevent_default:	Host must cancel the platform default now (Tab).
	- changed:			True if the session state was replaced.
	"""
	intent: Intent
	modifiers: ModifierState
	prevent_default: bool = False
	changed: bool = False


class TerminalSession:
	"""
	TerminalSession

	The unit a Presentation Layer talks to. Construct it from a
	TerminalConfig, subscribe() to re-render, and forward UI events.
	"""

	def __init__(
		self,
		config: Optional[TerminalConfig] = None,
		*,
		engine: Optional[CommandEngine] = None,
		clock: Optional[Clock] = None,
		token: Optional[CancellationToken] = None,
		router: Optional[KeyRouter] = None,
		telemetry: Optional[Telemetry] = None,
		session_id: Optional[str] = None,
	) -> None:
		self.id = session_id or str(uuid4())
		self._config = config or TerminalConfig()
		self._telemetry = (telemetry or get_telemetry()).bind(self.id)

		self.engine: CommandEngine = engine or ShellEngine(self._config.extensions)
		self.router = router or KeyRouter(telemetry=self._telemetry)
		self.autocomplete = AutocompleteBridge(self.engine)

		self._state = initial_state(
			prefix=self._config.prefix,
			history=self._config.history,
			structure=self._config.structure,
		)
		self._modifiers = ModifierState()

		self._token = token or CancellationToken()
		self._clock = clock
		self._playback: Optional[PlaybackScheduler] = None

		self._listeners: list[StateListener] = []

		log.debug("session %s created (user=%r)", self.id, self._state.settings.username)

	# -----------------------------------------------------------------------
	# Introspection
	# -----------------------------------------------------------------------

	@property
	def state(self) -> SessionState:
		return self._state

	@property
	def config(self) -> TerminalConfig:
		return self._config

	@property
	def modifiers(self) -> ModifierState:
		return self._modifiers

	@property
	def token(self) -> CancellationToken:
		return self._token

	@property
	def destroyed(self) -> bool:
		return self._token.cancelled

	@property
	def playback(self) -> Optional[PlaybackScheduler]:
		return self._playback

	# -----------------------------------------------------------------------
	# Listeners
	# -----------------------------------------------------------------------

	def subscribe(self, listener: StateListener) -> Callable[[], None]:
		"""
		Register a re-render callback. Returns an unsubscribe function.
		"""
		self._listeners.append(listener)

		def _unsubscribe() -> None:
			if listener in self._listeners:
				self._listeners.remove(listener)

		return _unsubscribe

	def should_render(self, next_config: TerminalConfig, next_state: SessionState) -> bool:
		"""
		Shallow identity gate: render unless both objects are the ones held.
		"""
		return next_state is not self._state or next_config is not self._config

	def _commit(self, next_state: SessionState, next_config: Optional[TerminalConfig] = None) -> bool:
		config = self._config if next_config is None else next_config
		if not self.should_render(config, next_state):
			return False

		self._state = next_state
		self._config = config

		for listener in list(self._listeners):
			listener(next_state)
		return True

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def mount(self, clock: Optional[Clock] = None) -> None:
		"""
		Called by the host once the view exists. Starts autotyping if configured.
		"""
		if clock is not None:
			self._clock = clock

		if self._config.autotyping:
			self.start_playback(self._config.messages)

	def update(self, config: TerminalConfig) -> bool:
		"""
		Merge an updated configuration.

		Only supplied fields are applied: structure/history are replaced by
		fresh copies, extensions replace the engine's command registry
		(built-ins underneath, extensions on top).

		Returns:
			True if listeners were notified.
		"""
		if config is self._config:
			return False

		state = self._state
		if config.structure is not None:
			state = with_structure(state, config.structure)
		if config.history is not None:
			state = with_history(state, config.history)
		if config.extensions is not None:
			self.engine.commands = build_registry(config.extensions)
			log.info("session %s: command registry replaced (%d extensions)", self.id, len(config.extensions))

		return self._commit(state, config)

	def destroy(self) -> None:
		"""
		Tear down: cancel in-flight playback and drop listeners.
		"""
		if self.destroyed:
			return
		self._token.cancel()
		self._listeners.clear()
		log.debug("session %s destroyed", self.id)

	# -----------------------------------------------------------------------
	# Key events
	# -----------------------------------------------------------------------

	def handle_key(
		self,
		key_code: int,
		phase: KeyPhase,
		modifiers: Optional[ModifierState] = None,
	) -> KeyOutcome:
		"""
		Interpret and apply one key event.

		modifiers defaults to the session's last known ModifierState; the
		returned outcome carries the state to use for the next event.
		"""
		current = self._modifiers if modifiers is None else modifiers

		if self.destroyed:
			return KeyOutcome(intent=NOOP, modifiers=current)

		intent = self.router.interpret(key_code, phase, current)

		if intent.kind is IntentKind.SET_CTRL:
			self._modifiers = current.with_ctrl(intent.ctrl)
			return KeyOutcome(intent=intent, modifiers=self._modifiers)

		self._modifiers = current
		changed = self._commit(self._resolve(intent))

		return KeyOutcome(
			intent=intent,
			modifiers=self._modifiers,
			prevent_default=intent.kind is IntentKind.AUTOCOMPLETE,
			changed=changed,
		)

	def _resolve(self, intent: Intent) -> SessionState:
		state = self._state
		kind = intent.kind

		if kind is IntentKind.CLEAR:
			return clear_input(self.engine.execute("clear", state))

		if kind is IntentKind.CANCEL:
			return clear_input(state)

		if kind is IntentKind.HISTORY_PREV:
			if self.engine.has_prev_command():
				command = self.engine.get_prev_command()
				if command is not None:
					return with_input(state, command)
			return state

		if kind is IntentKind.HISTORY_NEXT:
			# Unlike Up, an exhausted Down always empties the buffer.
			if self.engine.has_next_command():
				command = self.engine.get_next_command()
				if command is not None:
					return with_input(state, command)
			return with_input(state, "")

		if kind is IntentKind.AUTOCOMPLETE:
			return self.autocomplete.apply(state)

		return state

	# -----------------------------------------------------------------------
	# Input events
	# -----------------------------------------------------------------------

	def change(self, value: str) -> bool:
		if self.destroyed:
			return False
		return self._commit(with_input(self._state, value))

	def type_char(self, char: str) -> bool:
		if self.destroyed:
			return False
		return self._commit(append_input(self._state, char))

	def submit(self) -> bool:
		"""
		Execute the current buffer through the engine and clear the buffer.
		"""
		if self.destroyed:
			return False

		line = self._state.input.value
		with self._telemetry.timer("command.duration_ms"):
			next_state = self.engine.execute(line, self._state)

		self._telemetry.event("command.submitted", {"length": len(line)})
		log.debug("session %s submitted %r", self.id, line)

		return self._commit(submitted(next_state))

	# -----------------------------------------------------------------------
	# Playback
	# -----------------------------------------------------------------------

	def start_playback(self, messages: Iterable[Any]) -> bool:
		"""
		Autotype messages into the buffer, submitting each.

		Returns:
			False when rejected (no clock, torn down, or already playing).
		"""
		if self._clock is None:
			log.warning("session %s: playback requested without a clock", self.id)
			return False

		if self._playback is None:
			self._playback = PlaybackScheduler(
				self._clock,
				on_char=self.type_char,
				on_submit=self.submit,
				token=self._token,
				telemetry=self._telemetry,
			)

		return self._playback.start(messages)

	def cancel_playback(self) -> None:
		if self._playback is not None:
			self._playback.cancel()

	# -----------------------------------------------------------------------
	# Window affordances (results ignored)
	# -----------------------------------------------------------------------

	def close(self) -> None:
		self._config.on_close()

	def minimize(self) -> None:
		self._config.on_minimize()

	def expand(self) -> None:
		self._config.on_expand()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} buffer={self._state.input.value!r}>"
