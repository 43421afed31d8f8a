# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezterm (stdlib logging).
#
# Notes:
#	- Safe to call before any Tk window exists.
#	- init_logging() is idempotent (won't duplicate handlers).
#	- Session/engine/playback modules log through get_app_logger().
#
#	Supported cfg keys (first match wins):
#	- "logging.level", "log_level"			(default: "INFO")
#	- "logging.console", "log_console"		(default: True)
#	- "logging.file", "log_file"			(default: None)
#	- "logging.format", "log_format"		(default: standard format)
#	- "logging.datefmt", "log_datefmt"		(default: "%H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Collapse key aliases into _cfg_first
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "pyezterm.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()            -> pyezterm.app
		get_app_logger("session")   -> pyezterm.app.session
		get_app_logger("playback")  -> pyezterm.app.playback
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyezterm.

	Handlers are attached to the "pyezterm" logger (not root) so an embedding
	host keeps control of its own logging tree. Repeated calls with the same
	configuration are no-ops.

	Args:
		cfg:
			Any object with cfg.get(key, default) (e.g., AppConfig) or a dict.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_cfg_first(cfg, ("logging.level", "log_level"), "INFO"))
	console = bool(_cfg_first(cfg, ("logging.console", "log_console"), True))
	log_file = _cfg_first(cfg, ("logging.file", "log_file"), None)
	fmt = str(_cfg_first(cfg, ("logging.format", "log_format"), DEFAULT_FORMAT))
	datefmt = str(_cfg_first(cfg, ("logging.datefmt", "log_datefmt"), DEFAULT_DATEFMT))

	signature: tuple[Any, ...] = (
		level,
		console,
		str(log_file) if log_file else None,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_package_logger(
		level=level,
		console=console,
		log_file=str(log_file) if log_file else None,
		fmt=fmt,
		datefmt=datefmt,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_first(cfg: Any | None, keys: tuple[str, ...], default: Any = None) -> Any:
	"""
	Return the first non-None value among keys, else default.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	for key in keys:
		if callable(getter):
			value = getter(key, None)
		else:
			try:
				value = cfg[key]  # type: ignore[index]
			except (KeyError, IndexError, TypeError):
				value = None
		if value is not None:
			return value

	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _configure_package_logger(
	*,
	level: int,
	console: bool,
	log_file: str | None,
	fmt: str,
	datefmt: str,
) -> None:
	pkg = logging.getLogger("pyezterm")
	pkg.setLevel(level)

	# Drop only the handlers we installed on a previous init.
	for h in _HANDLERS:
		pkg.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		pkg.addHandler(ch)
		_HANDLERS.append(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		pkg.addHandler(fh)
		_HANDLERS.append(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Detach installed handlers and forget init state (unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	pkg = logging.getLogger("pyezterm")
	for h in _HANDLERS:
		pkg.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	pkg.setLevel(logging.NOTSET)

	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
