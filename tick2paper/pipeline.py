"""Conversion pipeline: backup CSV -> TaskPaper outline -> sink.

Steps:
1. Read the file (missing file is fatal)
2. Check the extension (reported, not fatal)
3. Parse CSV rows against the fixed column names
4. Drop preamble + header row (missing header is reported, not fatal)
5. Normalize rows into TaskRecords
6. Sort, group by project, render
7. Hand the text to the sink
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from tick2paper.config import Settings
from tick2paper.errors import ExtensionError, FormatError
from tick2paper.fileio import read_source
from tick2paper.header import data_rows
from tick2paper.models import RawRecord, normalize
from tick2paper.outline import render_outline, sort_and_group
from tick2paper.rows import parse_rows
from tick2paper.sinks import Sink

log = logging.getLogger(__name__)

CSV_SUFFIX = ".csv"


@dataclass
class ConversionResult:
    text: str = ""
    diagnostics: list[str] = field(default_factory=list)  # error kinds, e.g. "format"
    task_count: int = 0
    project_count: int = 0


def convert_rows(rows: Sequence[RawRecord], settings: Settings | None = None) -> ConversionResult:
    """Convert parsed rows (preamble and header included) into an outline."""
    if settings is None:
        settings = Settings()
    result = ConversionResult()

    records, header = data_rows(rows)
    if not header.found:
        if settings.strict_header:
            raise FormatError("no header row found")
        result.diagnostics.append(FormatError.kind)

    tasks = [normalize(r) for r in records]
    projects = sort_and_group(tasks, settings.default_timezone)

    result.text = render_outline(projects)
    result.task_count = len(tasks)
    result.project_count = len(projects)
    log.debug("Converted %d tasks in %d projects", result.task_count, result.project_count)
    return result


def convert_text(text: str, settings: Settings | None = None) -> ConversionResult:
    """Parse and convert CSV text; malformed CSV keeps the rows read so far."""
    if settings is None:
        settings = Settings()
    rows, error = parse_rows(text)
    if error and settings.strict_header:
        raise FormatError(error)

    result = convert_rows(rows, settings)
    if error and FormatError.kind not in result.diagnostics:
        result.diagnostics.append(FormatError.kind)
    return result


def convert_file(path: Path, settings: Settings | None = None) -> ConversionResult:
    """Convert a backup file. Raises PathError if it cannot be read."""
    path = Path(path)
    text = read_source(path)
    wrong_suffix = path.suffix.lower() != CSV_SUFFIX
    if wrong_suffix:
        log.warning("%s does not have a %s extension", path, CSV_SUFFIX)

    result = convert_text(text, settings)
    if wrong_suffix:
        result.diagnostics.insert(0, ExtensionError.kind)
    return result


def run(path: Path, sink: Sink, settings: Settings | None = None) -> ConversionResult:
    """Convert *path* and deliver the outline to *sink*."""
    result = convert_file(path, settings)
    sink(result.text)
    return result
