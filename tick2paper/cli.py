"""tick2paper command line: convert a TickTick backup to TaskPaper.

Usage:
    tick2paper backup.csv                 # copy outline to the clipboard
    tick2paper backup.csv --stdout
    tick2paper backup.csv -o outline.taskpaper --timezone Europe/Berlin
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tick2paper.config import Settings, load_settings
from tick2paper.errors import Tick2PaperError
from tick2paper.pipeline import run
from tick2paper.sinks import Sink, clipboard_sink, file_sink, stdout_sink

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

ERRORS = {
    "path": "The file does not exist, try another path.",
    "extension": "The file does not have a .csv extension, try another path.",
    "format": (
        "The file is either\nA) not valid CSV, or\nB) TickTick's backup format has changed\n\n"
        "The output likely will not be formatted properly, if it works at all."
    ),
    "sink": "The output could not be delivered.",
}


def report_error(kind: str, detail: str = "") -> None:
    message = ERRORS.get(kind, "Conversion failed.")
    if detail and kind == "sink":
        message = f"{message}\n{detail}"
    print(f"{RED}\n{message}{RESET}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick2paper",
        description="Convert a TickTick backup CSV into a TaskPaper outline grouped by project.",
    )
    parser.add_argument("file", type=Path, help="TickTick backup CSV")
    out = parser.add_mutually_exclusive_group()
    out.add_argument("-o", "--output", type=Path, help="write the outline to this file")
    out.add_argument("--stdout", action="store_true", help="print the outline instead of copying it")
    parser.add_argument("--timezone", help="zone for tasks whose own timezone is unknown")
    parser.add_argument("--strict", action="store_true", help="fail when no header row is found")
    parser.add_argument("--config", type=Path, help="settings file (default: $TICK2PAPER_CONFIG)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command-line flags override the settings file."""
    if args.output:
        settings.output = "file"
        settings.output_path = str(args.output)
    elif args.stdout:
        settings.output = "stdout"
    if args.timezone:
        settings.default_timezone = args.timezone
    if args.strict:
        settings.strict_header = True
    if args.verbose:
        settings.log_level = "DEBUG"
    return settings


def select_sink(settings: Settings) -> tuple[Sink, str | None]:
    """Sink for the configured output plus the message shown on success."""
    if settings.output == "file" and settings.output_path:
        path = Path(settings.output_path).expanduser()
        return file_sink(path), f"The output has been saved to {path}."
    if settings.output == "stdout":
        return stdout_sink, None
    return clipboard_sink, "The output has been saved to your clipboard."


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_args(load_settings(args.config), args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    sink, success = select_sink(settings)
    try:
        result = run(args.file, sink, settings)
    except Tick2PaperError as e:
        report_error(e.kind, str(e))
        return 1

    for kind in result.diagnostics:
        report_error(kind)

    if success:
        print(f"{GREEN}\n{success}{RESET}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
