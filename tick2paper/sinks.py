"""Destinations for the rendered outline.

A sink is any callable taking the outline text. Delivery problems are
raised as SinkError and reported by the caller.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable

from tick2paper.errors import SinkError
from tick2paper.fileio import write_text_atomic

log = logging.getLogger(__name__)

Sink = Callable[[str], None]

CLIPBOARD_COMMANDS = [
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip.exe",),
]


def copy_to_clipboard(value: str) -> str | None:
    """Copy *value* with the first clipboard tool that works; return its name."""
    for command in CLIPBOARD_COMMANDS:
        executable = command[0]
        if shutil.which(executable) is None:
            continue
        try:
            subprocess.run(
                command,
                input=value,
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=2,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("Clipboard command %s failed: %s", executable, e)
            continue
        return executable
    return None


def clipboard_sink(text: str) -> None:
    backend = copy_to_clipboard(text)
    if backend is None:
        raise SinkError("no working clipboard command (pbcopy, wl-copy, xclip, xsel, clip.exe)")
    log.info("Copied outline via %s", backend)


def file_sink(path: Path) -> Sink:
    def write(text: str) -> None:
        try:
            write_text_atomic(path, text)
        except OSError as e:
            raise SinkError(f"{path}: {e}") from e
        log.info("Wrote outline to %s", path)

    return write


def stdout_sink(text: str) -> None:
    sys.stdout.write(text + "\n")
