"""Command line entry point for the terminal editor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Optional, Sequence

from vin.adapters.terminal import TerminalHost, run_terminal
from vin.buffer import FileLoadError
from vin.config import EditorConfig
from vin.runtime import telemetry
from vin.runtime.loop import EventLoop
from vin.session import EditorSession


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vin", description="Modal terminal text editor.")
    parser.add_argument("filename", nargs="?", help="File to open")
    parser.add_argument(
        "--tab-stop",
        type=int,
        default=None,
        help="Columns per tab stop (default: $VIN_TAB_STOP or 4)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Apply a named telemetry preset",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EditorConfig:
    config = EditorConfig.from_env()
    if args.tab_stop is not None:
        config = replace(config, tab_stop=args.tab_stop)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset or args.log_file:
        telemetry.configure(preset=args.log_preset, log_file=args.log_file)

    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"vin: {exc}", file=sys.stderr)
        return 2

    try:
        session = EditorSession.open(args.filename, config)
    except FileLoadError as exc:
        telemetry.record_event("document.load_failed", level="error", data={"path": exc.path})
        print(f"vin: {exc}", file=sys.stderr)
        return 1

    def make_loop(host: TerminalHost) -> EventLoop:
        return EventLoop(session, host, host)

    try:
        run_terminal(make_loop)
    except OSError as exc:
        print(f"vin: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
