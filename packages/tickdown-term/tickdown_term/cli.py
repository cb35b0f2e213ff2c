"""Command-line entry point."""
from __future__ import annotations

import argparse
import logging

from tickdown import TimerConfig
from tickdown.config import DEFAULT_SOUND_FILES, SOUND_BACKENDS
from tickdown_term.app import TimerApp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tickdown",
        description="Terminal countdown timers with an audible alarm.",
    )
    p.add_argument("--sound", choices=SOUND_BACKENDS, default="pygame",
                   help="Alarm sound backend (default: pygame)")
    p.add_argument("--sound-file", action="append", dest="sound_files", metavar="PATH",
                   help="Alarm sound file to try; repeat to give fallbacks")
    p.add_argument("--sound-command", default="paplay",
                   help="Player program for --sound command (default: paplay)")
    p.add_argument("--log-file", default=None,
                   help="Write log records to this file")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Log level for --log-file (default: INFO)")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> TimerConfig:
    return TimerConfig(
        sound_backend=args.sound,
        sound_command=tuple(args.sound_command.split()),
        sound_files=tuple(args.sound_files) if args.sound_files else DEFAULT_SOUND_FILES,
    )


def configure_logging(log_file: str | None, level: str) -> None:
    """Log to *log_file* only; the terminal belongs to the UI."""
    if log_file is None:
        logging.getLogger("tickdown").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    app = TimerApp(build_config(args))
    app.run()
    app.timer_loop.machine.alarms.shutdown()
    return app.return_code if app.return_code is not None else 0
