"""Named error kinds for tick2paper.

The core only signals *which* condition occurred via ``kind``; turning that
into user-facing text is the CLI's job.
"""

from __future__ import annotations


class Tick2PaperError(Exception):
    """Base class for conversion errors."""

    kind = "error"


class PathError(Tick2PaperError):
    """Input file does not exist or cannot be read."""

    kind = "path"


class ExtensionError(Tick2PaperError):
    """Input file does not carry the .csv extension."""

    kind = "extension"


class FormatError(Tick2PaperError):
    """No header row was found, or the content is not valid CSV."""

    kind = "format"


class SinkError(Tick2PaperError):
    """The rendered outline could not be delivered."""

    kind = "sink"
