# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezterm.core.logging.
#
# Notes:
#	- conftest.py resets installed handlers after every test.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyezterm.core import logging as plog


def _pkg_handlers() -> list[logging.Handler]:
	return [h for h in logging.getLogger("pyezterm").handlers if h in plog._HANDLERS]


def test_get_app_logger_names():
	assert plog.get_app_logger().name == "pyezterm.app"
	assert plog.get_app_logger("session").name == "pyezterm.app.session"
	assert plog.get_logger("x.y").name == "x.y"


def test_init_logging_is_idempotent():
	plog.init_logging({"log_level": "DEBUG"})
	first = _pkg_handlers()

	plog.init_logging({"log_level": "DEBUG"})

	assert _pkg_handlers() == first
	assert len(first) == 1


def test_init_logging_reconfigures_on_change():
	plog.init_logging({"log_level": "INFO"})
	plog.init_logging({"log_level": "WARNING"})

	assert len(_pkg_handlers()) == 1
	assert logging.getLogger("pyezterm").level == logging.WARNING


def test_init_logging_dotted_keys_win():
	plog.init_logging({"logging.level": "ERROR", "log_level": "DEBUG"})

	assert logging.getLogger("pyezterm").level == logging.ERROR


def test_init_logging_accepts_get_style_config():
	class _Cfg:
		def get(self, key, default=None):
			return {"log_console": False}.get(key, default)

	plog.init_logging(_Cfg())

	assert _pkg_handlers() == []


def test_init_logging_file_handler(tmp_path):
	target = tmp_path / "logs" / "pyezterm.log"

	plog.init_logging({"log_console": False, "log_file": str(target)})
	plog.get_app_logger("session").warning("hello file")
	for h in _pkg_handlers():
		h.flush()

	assert target.exists()
	assert "hello file" in target.read_text(encoding="utf-8")


@pytest.mark.parametrize(
	"value, expected",
	[
		("debug", logging.DEBUG),
		(" Warning ", logging.WARNING),
		("10", 10),
		(logging.ERROR, logging.ERROR),
		("nonsense", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(value, expected):
	assert plog._coerce_level(value) == expected
