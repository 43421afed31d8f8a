# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezterm (logging, telemetry).
#
# Notes:
#	No Tk dependencies here.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .logging import init_logging, get_logger, get_app_logger
from .telemetry import Telemetry, init_telemetry, get_telemetry

__all__ = [
	"get_logger",
	"get_app_logger",
	"init_logging",
	"Telemetry",
	"init_telemetry",
	"get_telemetry",
]
