from __future__ import annotations

import argparse

from pyezterm.app import App
from pyezterm.app.config import TerminalConfig, Theme
from pyezterm.app.playback import PlaybackMessage


DEMO_SCRIPT = (
	PlaybackMessage(text="help", speed=90, timeout=800),
	PlaybackMessage(text="whoami", speed=90, timeout=800),
	PlaybackMessage(text="echo hello from pyezterm", speed=60, timeout=0),
)


def build_app(app: App, *, theme: Theme, demo: bool) -> None:
	app.add_terminal(TerminalConfig(
		prefix="hacker@default",
		theme=theme,
		autotyping=demo,
		messages=DEMO_SCRIPT,
		on_close=app.destroy,
		on_minimize=app.iconify,
	))


def main() -> None:
	parser = argparse.ArgumentParser(prog="pyezterm", description="Simulated terminal session.")
	parser.add_argument("--theme", choices=[t.value for t in Theme], default=Theme.LIGHT.value)
	parser.add_argument("--demo", action="store_true", help="autotype a short demo script")
	parser.add_argument("--log-level", default="INFO")
	args = parser.parse_args()

	app = App(cfg={"log_level": args.log_level})
	build_app(app, theme=Theme(args.theme), demo=args.demo)
	app.run()


if __name__ == "__main__":
	main()
